"""Loading type definitions from files"""

from __future__ import annotations

from os import PathLike
from pathlib import Path
from typing import Union

import structlog

from ..error import UsageError

__all__ = ["load_type_defs"]

logger = structlog.get_logger(__name__)


def load_type_defs(file_path: Union[str, "PathLike[str]", None] = None) -> str:
    """Load type definitions from a ``.graphql`` or ``.gql`` file.

    The file is read as UTF-8 text and returned unchanged.
    """
    if not file_path:
        msg = "load_type_defs: file_path required"
        raise UsageError(msg)
    if not isinstance(file_path, (str, PathLike)):
        msg = "load_type_defs: expected file_path to be a string or a path"
        raise UsageError(msg)
    path = Path(file_path)
    with path.open(encoding="utf-8") as file:
        text = file.read()
    logger.debug("type_defs_loaded", path=str(path), length=len(text))
    return text
