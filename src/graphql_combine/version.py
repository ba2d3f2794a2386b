from typing import Tuple

__all__ = ["version", "version_info"]


version = "1.0.0"

version_info: Tuple[int, ...] = tuple(int(part) for part in version.split("."))
