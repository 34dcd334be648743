from __future__ import annotations
from typing import Dict, List, Sequence
from pathlib import Path
import enum
import logging

from hdr.base import Outcome
from hdr.discovery import discover
from hdr.engine import HeaderEngine
from hdr.io import read_text_file, write_text_file
from hdr.messages import error, info, skipped, success

logger = logging.getLogger(__name__)

DEFAULT_SOURCE_DIR = "src"


class Mode(enum.Enum):
    ADD = "add"
    CHECK = "check"
    REMOVE = "remove"

    @property
    def verb(self) -> str:
        match self:
            case Mode.ADD:    return "Adding headers to"
            case Mode.CHECK:  return "Checking"
            case Mode.REMOVE: return "Removing headers from"


def report(outcome: Outcome, name: str, detail: str | None = None) -> None:
    match outcome:
        case Outcome.HEADER_PRESENT:
            success(name)
        case Outcome.HEADER_ABSENT:
            error(f"{name} (no header)")
        case Outcome.HEADER_ADDED:
            success(f"Added header: {name}")
        case Outcome.HEADER_REMOVED:
            success(f"Removed header: {name}")
        case Outcome.SKIPPED_UNSUPPORTED:
            skipped(f"Skipped (unsupported): {name}")
        case Outcome.SKIPPED_ALREADY_PRESENT:
            skipped(f"Already has header: {name}")
        case Outcome.SKIPPED_NOTHING_TO_REMOVE:
            skipped(f"No header found: {name}")
        case Outcome.ERROR:
            error(f"Error processing {name}: {detail}")


def process_file(engine: HeaderEngine, path: Path, mode: Mode, description: str = "") -> Outcome:
    """
    Runs one mode on one file and reports the outcome. I/O and decoding
    failures are reported as Outcome.ERROR instead of raised.
    """
    name = engine.relative_name(path)
    try:
        content = read_text_file(path)

        if mode == Mode.CHECK:
            outcome = Outcome.HEADER_PRESENT if engine.check(path, content) else Outcome.HEADER_ABSENT
        else:
            if mode == Mode.ADD:
                change = engine.add(path, content, description)
            else:
                change = engine.remove(path, content)
            if change.changed:
                write_text_file(path, change.content)
            outcome = change.outcome

    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Failed on %s", path, exc_info=True)
        report(Outcome.ERROR, name, detail=str(e))
        return Outcome.ERROR

    report(outcome, name)
    return outcome


def resolve_files(root: Path, paths: Sequence[str], exclude: Sequence[str] = ()) -> List[Path]:
    """
    Explicit paths are taken relative to the project root. Without any, every
    supported file under `<root>/src` is discovered, with `exclude` patterns
    matched relative to the project root.
    """
    if paths:
        return [Path(p) if Path(p).is_absolute() else root / p for p in paths]
    return discover(root / DEFAULT_SOURCE_DIR, exclude, base=root)


def header_main(engine: HeaderEngine, files: Sequence[Path], mode: Mode = Mode.ADD, description: str = "") -> int:
    """
    Processes every file in order and prints a tally. Returns the exit
    status: in check mode 1 unless every file has a header, otherwise 0.
    """
    if not files:
        info("No files found to process.")
        return 0

    info(f"{mode.verb} {len(files)} file(s)...")

    counts: Dict[Outcome, int] = {}
    for path in files:
        outcome = process_file(engine, path, mode, description)
        counts[outcome] = counts.get(outcome, 0) + 1

    processed = sum(n for outcome, n in counts.items() if outcome.processed)
    info(f"Done! {processed}/{len(files)} files processed.")
    logger.debug("Outcomes: %s", {k.value: v for k, v in counts.items()})

    if mode == Mode.CHECK and processed != len(files):
        return 1
    return 0
