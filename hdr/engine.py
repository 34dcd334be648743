from pathlib import Path
import os
import logging

from hdr.base import HeaderChange, Outcome
from hdr.classify import classify
from hdr.config import Configuration
from hdr.matcher import SHEBANG, has_header, preamble_end, remove_header
from hdr.templates import render_header

logger = logging.getLogger(__name__)


class HeaderEngine:
    """
    Adds, checks and removes headers on a single file's content. Never touches
    the filesystem; callers read and write.
    """

    def __init__(self, config: Configuration, root: Path):
        assert isinstance(config, Configuration), f"Expected Configuration, got {type(config)}"
        assert isinstance(root, Path), f"Expected Path, got {type(root)}"
        self.config = config
        self.root = root

    def relative_name(self, path: Path) -> str:
        """
        The path as written into `@file`: relative to the project root, with
        forward slashes on every platform.
        """
        try:
            rel = os.path.relpath(path, self.root)
        except ValueError:
            # different drive on Windows
            rel = str(path)
        return rel.replace('\\', '/')

    def render(self, path: Path, description: str = "") -> str:
        kind = classify(path)
        assert kind is not None, f"Unsupported file type: {path}"
        return render_header(kind, self.config, self.relative_name(path), description)

    def check(self, path: Path, content: str) -> bool:
        return has_header(content)

    def add(self, path: Path, content: str, description: str = "") -> HeaderChange:
        if classify(path) is None:
            return HeaderChange(Outcome.SKIPPED_UNSUPPORTED, content)

        if has_header(content):
            return HeaderChange(Outcome.SKIPPED_ALREADY_PRESENT, content)

        header = self.render(path, description)
        body = remove_header(content)

        # The header goes below the BOM and interpreter line, never above them
        split = preamble_end(body)
        if split:
            preamble, body = body[:split], body[split:]
            if SHEBANG in preamble and not preamble.endswith('\n'):
                preamble += '\n'
            header = preamble + header

        logger.debug("Adding header to %s", path)
        return HeaderChange(Outcome.HEADER_ADDED, header + body)

    def remove(self, path: Path, content: str) -> HeaderChange:
        if not has_header(content):
            return HeaderChange(Outcome.SKIPPED_NOTHING_TO_REMOVE, content)

        logger.debug("Removing header from %s", path)
        return HeaderChange(Outcome.HEADER_REMOVED, remove_header(content))
