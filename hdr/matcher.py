"""
Detection and removal of existing headers.

A header is a comment at the very start of a file that mentions at least one
of the field markers (`@license`, `@copyright`, `@file`). Comments without a
marker are ordinary comments and never touched. A leading byte order
mark and an interpreter line (`#!...`) on the first line are not part of the
header: the header may sit directly below them, and removal leaves them in
place.

Removal does not look at the file type: every recognizer is tried on every
file, so a `.ts` file that opens with an HTML-style header loses it as well.
"""
from typing import ClassVar, Optional, Tuple
from dataclasses import dataclass
import abc

from hdr.base import Dialect

FIELD_MARKERS: Tuple[str, ...] = ("@license", "@copyright", "@file")

SHEBANG = "#!"
BOM = "\ufeff"


def has_field_marker(text: str) -> bool:
    return any(marker in text for marker in FIELD_MARKERS)


def preamble_end(content: str) -> int:
    """
    Offset just past the byte order mark and interpreter line, whichever of
    them the file has. 0 if it has neither.
    """
    pos = 1 if content.startswith(BOM) else 0
    if not content.startswith(SHEBANG, pos):
        return pos
    newline = content.find("\n", pos)
    return len(content) if newline < 0 else newline + 1


def _skip_blank(content: str, pos: int) -> int:
    """
    Moves past the whitespace following a header. Stops at the start of the
    first non-blank line so its indentation is kept.
    """
    end = pos
    while end < len(content) and content[end].isspace():
        end += 1
    if end == len(content):
        return end
    newline = content.rfind("\n", pos, end)
    return newline + 1 if newline >= 0 else end


@dataclass(frozen=True)
class HeaderSpan:
    start: int
    end: int

    def cut(self, content: str) -> str:
        return content[:self.start] + content[self.end:]


class Recognizer(abc.ABC):
    dialect: ClassVar[Dialect]

    def match(self, content: str) -> Optional[HeaderSpan]:
        start = preamble_end(content)
        end = self.match_at(content, start)
        if end is None:
            return None
        return HeaderSpan(start, _skip_blank(content, end))

    @abc.abstractmethod
    def match_at(self, content: str, start: int) -> Optional[int]:
        """
        Returns the offset where the header comment starting at `start` ends,
        or None if there is no header there.
        """
        raise NotImplementedError()


class DelimitedRecognizer(Recognizer):
    """
    Header written as a single delimited comment, e.g. `/* ... */`. The
    comment ends at the first closing token.
    """
    opening: ClassVar[str]
    closing: ClassVar[str]

    def match_at(self, content: str, start: int) -> Optional[int]:
        if not content.startswith(self.opening, start):
            return None
        close_at = content.find(self.closing, start + len(self.opening))
        if close_at < 0:
            return None
        end = close_at + len(self.closing)
        if not has_field_marker(content[start:end]):
            return None
        return end


class BlockCommentRecognizer(DelimitedRecognizer):
    dialect = Dialect.BLOCK_COMMENT
    opening = "/*"
    closing = "*/"


class MarkupCommentRecognizer(DelimitedRecognizer):
    dialect = Dialect.MARKUP_COMMENT
    opening = "<!--"
    closing = "-->"


class ShellCommentRecognizer(Recognizer):
    """
    Header written as a run of consecutive `#` lines, at least one of which
    carries a field marker.
    """
    dialect = Dialect.SHELL_COMMENT

    def match_at(self, content: str, start: int) -> Optional[int]:
        pos = start
        marked = False
        while pos < len(content) and content[pos] == "#":
            newline = content.find("\n", pos)
            line_end = len(content) if newline < 0 else newline + 1
            marked = marked or has_field_marker(content[pos:line_end])
            pos = line_end
        return pos if marked else None


RECOGNIZERS: Tuple[Recognizer, ...] = (
    BlockCommentRecognizer(),
    MarkupCommentRecognizer(),
    ShellCommentRecognizer(),
)


def find_header(content: str) -> Optional[Tuple[Recognizer, HeaderSpan]]:
    for recognizer in RECOGNIZERS:
        span = recognizer.match(content)
        if span is not None:
            return recognizer, span
    return None


def has_header(content: str) -> bool:
    return find_header(content) is not None


def remove_header(content: str) -> str:
    """
    Strips the leading header. Repeats until no recognizer matches, so stacked
    headers all go and a second call is always a no-op.
    """
    while (found := find_header(content)) is not None:
        _, span = found
        assert span.end > span.start, f"Empty header span: {span}"
        content = span.cut(content)
    return content
