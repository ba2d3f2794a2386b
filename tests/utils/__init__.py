"""Test utilities"""

from .dedent import dedent

__all__ = ["dedent"]
