"""Discovery of localization files under a directory tree."""

from pathlib import Path
from typing import List

from ..utils.logging import get_logger

DEFAULT_EXTENSION = 'strings'


def discover(root: Path, extension: str = DEFAULT_EXTENSION) -> List[Path]:
    """
    Find every localization file below ``root``.

    Every subdirectory is descended into. A regular file is selected when
    its suffix is exactly ``.<extension>`` (case-sensitive). The order of
    the result is unspecified.

    Args:
        root: Existing, readable directory
        extension: File extension without the leading dot

    Returns:
        List of matching file paths

    Raises:
        OSError: A directory in the tree could not be listed
    """
    logger = get_logger()
    suffix = f'.{extension}'
    found: List[Path] = []
    pending = [Path(root)]

    while pending:
        directory = pending.pop()
        logger.debug(f"Scanning {directory}")

        for path in directory.iterdir():
            if path.is_dir():
                pending.append(path)
            elif path.is_file() and path.suffix == suffix:
                found.append(path)

    logger.debug(f"Found {len(found)} {suffix} files under {root}")
    return found
