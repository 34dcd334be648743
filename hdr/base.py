from dataclasses import dataclass
import enum


class Dialect(enum.Enum):
    """
    Structural comment syntax a header is written in.
    """
    BLOCK_COMMENT = "block"     # /* ... */
    MARKUP_COMMENT = "markup"   # <!-- ... -->
    SHELL_COMMENT = "shell"     # # ...


class TemplateKind(enum.Enum):
    """
    Header layout, one level finer than Dialect: scripts and stylesheets share
    the block comment syntax but only scripts carry a description line.
    """
    SCRIPT = "script"
    STYLE = "style"
    MARKUP = "markup"
    SHELL = "shell"

    @property
    def dialect(self) -> Dialect:
        match self:
            case TemplateKind.SCRIPT | TemplateKind.STYLE:
                return Dialect.BLOCK_COMMENT
            case TemplateKind.MARKUP:
                return Dialect.MARKUP_COMMENT
            case TemplateKind.SHELL:
                return Dialect.SHELL_COMMENT


class Outcome(enum.Enum):
    """
    What happened to a single file.
    """
    HEADER_PRESENT = "header present"
    HEADER_ABSENT = "header absent"
    HEADER_ADDED = "header added"
    HEADER_REMOVED = "header removed"
    SKIPPED_UNSUPPORTED = "skipped (unsupported)"
    SKIPPED_ALREADY_PRESENT = "skipped (already has header)"
    SKIPPED_NOTHING_TO_REMOVE = "skipped (no header found)"
    ERROR = "error"

    @property
    def processed(self) -> bool:
        return self in (Outcome.HEADER_PRESENT, Outcome.HEADER_ADDED, Outcome.HEADER_REMOVED)


@dataclass(frozen=True)
class HeaderChange:
    """
    Result of an add or remove: the outcome and the content to write back.
    When nothing changed, `content` is the input unchanged.
    """
    outcome: Outcome
    content: str

    @property
    def changed(self) -> bool:
        return self.outcome in (Outcome.HEADER_ADDED, Outcome.HEADER_REMOVED)
