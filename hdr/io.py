from typing import Callable, Generator, List

import os
import shutil
import logging
import tempfile
from pathlib import Path
from difflib import unified_diff

import pathspec

logger = logging.getLogger(__name__)

ENCODING = 'utf-8'

##################################################################################################
# File Reading/Writing
##################################################################################################

def read_text_file(path: Path) -> str:
    assert isinstance(path, Path), f"Expected Path, got {type(path)}"
    # newline='' keeps \r\n intact so a rewrite only touches the header
    with open(path, 'rt', encoding=ENCODING, newline='') as f:
        return f.read()


def write_text_file(path: Path, content: str) -> bool:
    """
    Replaces the file's content atomically: the new text goes to a temporary
    file next to the target, which is then renamed over it. If anything fails
    before the rename, the original file is untouched.

    Returns False if the file already held exactly this content.
    """
    assert isinstance(path, Path), f"Expected Path, got {type(path)}"

    # replace the link's target, not the link
    path = path.resolve()

    content_bytes = content.encode(ENCODING)

    if path.exists():
        old_bytes = path.read_bytes()
        if old_bytes == content_bytes:
            return False

        if logger.isEnabledFor(logging.DEBUG):
            old_content = old_bytes.decode(ENCODING, errors='replace')
            diff = unified_diff(old_content.splitlines(), content.splitlines(), lineterm='')
            total_added = 0
            total_removed = 0
            for line in diff:
                if line.startswith('+') and not line.startswith('+++'):
                    total_added += 1
                elif line.startswith('-') and not line.startswith('---'):
                    total_removed += 1
            logger.debug('Modifying %s: %d lines removed, %d lines added', path, total_removed, total_added)

    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f'.{path.name}.', suffix='.tmp')
    tmp = Path(tmp_name)
    try:
        with os.fdopen(fd, 'wb') as f:
            f.write(content_bytes)
        if path.exists():
            shutil.copymode(path, tmp)
        os.replace(tmp, path)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise
    return True


##################################################################################################
# Walking
##################################################################################################

def walk_files(path: Path, predicate: Callable[[Path], bool] | None = None) -> Generator[Path, None, None]:
    """
    Yields every file below `path`. Entries rejected by `predicate` are
    skipped, and rejected directories are not descended into. Children are
    visited in name order.
    """
    assert isinstance(path, Path), f"Expected Path, got {type(path)}"
    if predicate is not None and not predicate(path):
        return

    if path.is_file():
        yield path

    elif path.is_dir():
        for subfile in sorted(os.listdir(path)):
            yield from walk_files(path / subfile, predicate=predicate)


class FileSet:
    """
    Gitignore-style patterns evaluated relative to `base_path`.
    """
    def __init__(self, base_path: Path, patterns: List[str]):
        self.base_path = base_path
        self.patterns = list(patterns)
        self.path_spec = pathspec.GitIgnoreSpec.from_lines(self.patterns)

    def __call__(self, path: Path) -> bool:
        rel_path = path.relative_to(self.base_path).as_posix()
        if path.is_dir():
            rel_path += '/'
        return self.path_spec.match_file(rel_path)

    def __bool__(self) -> bool:
        return bool(self.patterns)
