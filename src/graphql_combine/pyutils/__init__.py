"""Python Utils

This package contains dependency-free Python utility functions used throughout the
codebase. They are not part of the module interface and are subject to change.
"""

from .is_sequence import is_sequence

__all__ = ["is_sequence"]
