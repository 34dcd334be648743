from typing import Dict, List, Optional
from pathlib import Path
import os

from hdr.base import Dialect, TemplateKind

# ============================================================
# Template kind by extension (matched case-insensitively)
# ============================================================
KIND_BY_EXTENSION: Dict[str, TemplateKind] = {
    # -- Scripts --
    ".js":   TemplateKind.SCRIPT,
    ".mjs":  TemplateKind.SCRIPT,
    ".cjs":  TemplateKind.SCRIPT,
    ".jsx":  TemplateKind.SCRIPT,
    ".ts":   TemplateKind.SCRIPT,
    ".tsx":  TemplateKind.SCRIPT,
    ".mts":  TemplateKind.SCRIPT,
    ".cts":  TemplateKind.SCRIPT,

    # -- Stylesheets --
    ".css":  TemplateKind.STYLE,
    ".scss": TemplateKind.STYLE,
    ".less": TemplateKind.STYLE,

    # -- Markup --
    ".html": TemplateKind.MARKUP,
    ".htm":  TemplateKind.MARKUP,

    # -- Shell --
    ".sh":   TemplateKind.SHELL,
    ".bash": TemplateKind.SHELL,
}

SUPPORTED_EXTENSIONS: List[str] = list(KIND_BY_EXTENSION.keys())


def classify(path: Path | str) -> Optional[TemplateKind]:
    """
    Returns the header layout for the file, or None when its extension is not
    supported.
    """
    _, ext = os.path.splitext(str(path))
    return KIND_BY_EXTENSION.get(ext.lower())


def classify_dialect(path: Path | str) -> Optional[Dialect]:
    kind = classify(path)
    return kind.dialect if kind is not None else None


def is_supported(path: Path | str) -> bool:
    return classify(path) is not None
