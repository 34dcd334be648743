from typing import FrozenSet, Iterable, List, Optional
from pathlib import Path
import logging

from hdr.classify import is_supported
from hdr.io import FileSet, walk_files

logger = logging.getLogger(__name__)

# Directory names never descended into
EXCLUDED_DIRECTORIES: FrozenSet[str] = frozenset({
    "node_modules",  # dependency cache
    "dist",          # build output
    "coverage",      # coverage reports
    ".git",          # version control metadata
    ".turbo",        # task runner cache
})


class DiscoveryError(Exception):
    """
    Raised when the discovery root cannot be walked at all.
    """


def discover(root: Path, exclude: Iterable[str] = (), base: Optional[Path] = None) -> List[Path]:
    """
    Collects every file below `root` with a supported extension.

    Directories named in EXCLUDED_DIRECTORIES are pruned, as is anything
    matching one of the gitignore-style `exclude` patterns. Patterns are
    relative to `base`, which defaults to `root`. Symbolic links are not
    followed. The result is in walk order, which is sorted by name at every
    level.
    """
    assert isinstance(root, Path), f"Expected Path, got {type(root)}"
    if not root.exists():
        raise DiscoveryError(f"Directory does not exist: {root}")
    if not root.is_dir():
        raise DiscoveryError(f"Not a directory: {root}")

    excluded = FileSet(base or root, list(exclude))

    def keep(path: Path) -> bool:
        if path == root:
            return True
        if path.is_symlink():
            logger.debug("Skipping symlink %s", path)
            return False
        if path.is_dir():
            if path.name in EXCLUDED_DIRECTORIES:
                logger.debug("Skipping excluded directory %s", path)
                return False
        elif not is_supported(path):
            return False
        if excluded and excluded(path):
            logger.debug("Skipping %s (matches exclude pattern)", path)
            return False
        return True

    try:
        files = list(walk_files(root, predicate=keep))
    except OSError as e:
        raise DiscoveryError(f"Cannot walk {root}: {e}") from e

    logger.debug("Discovered %d file(s) under %s", len(files), root)
    return files
