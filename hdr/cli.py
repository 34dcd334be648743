from typing import List, Optional
from dataclasses import replace
from pathlib import Path
import argparse
import logging
import os
import sys

from hdr.classify import SUPPORTED_EXTENSIONS
from hdr.config import ConfigError, resolve_settings
from hdr.discovery import DiscoveryError
from hdr.engine import HeaderEngine
from hdr.messages import error
from hdr.tasks.header import Mode, header_main, resolve_files

EXIT_FATAL = 2

EPILOG = f"""\
examples:
  hdr                          # add headers to all files in src/
  hdr src/index.ts             # add a header to one file
  hdr --check                  # check all files in src/
  hdr --remove src/a.ts        # remove the header from a file

supported file types:
  {', '.join(SUPPORTED_EXTENSIONS)}
"""


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hdr",
        description="Adds, checks or removes license/copyright headers in source files.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument('files', type=str, nargs='*', help='Files to process. Defaults to every supported file under <root>/src.')

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument('--check', action='store_true', help="Check if headers are present (don't modify files).")
    mode.add_argument('--remove', action='store_true', help='Remove headers from files.')

    parser.add_argument('--description', type=str, default='', help='Text for the @description field of script headers.')
    parser.add_argument('--root', type=str, default='.', help='Project root; @file paths are relative to it (default: current directory).')
    parser.add_argument('--config', type=str, help='YAML configuration file (default: <root>/.hdr.yaml if present).')
    parser.add_argument('--exclude', type=str, action='append', default=[], metavar='PATTERN', help='Gitignore-style pattern, relative to the project root, to leave out of discovery. Repeatable.')

    parser.add_argument('--author', type=str, help='Override the configured author.')
    parser.add_argument('--license', type=str, help='Override the configured license.')
    parser.add_argument('--year', type=int, help='Override the copyright year (default: current year).')
    parser.add_argument('--project-name', type=str, help='Override the configured project name.')

    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging.')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    if sys.platform.lower() == "win32":
        os.system('color')
        sys.stdout.reconfigure(encoding='utf-8') # type: ignore
        sys.stderr.reconfigure(encoding='utf-8') # type: ignore

    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format='%(message)s')

    if args.check:    mode = Mode.CHECK
    elif args.remove: mode = Mode.REMOVE
    else:             mode = Mode.ADD

    root = Path(args.root).resolve()

    try:
        settings = resolve_settings(root, Path(args.config) if args.config else None)
    except ConfigError as e:
        error(str(e))
        return EXIT_FATAL

    overrides = {
        'author': args.author,
        'license': args.license,
        'year': args.year,
        'project_name': args.project_name,
    }
    config = replace(settings.config, **{k: v for k, v in overrides.items() if v is not None})

    try:
        files = resolve_files(root, args.files, settings.exclude + args.exclude)
    except DiscoveryError as e:
        error(str(e))
        return EXIT_FATAL

    engine = HeaderEngine(config, root)
    return header_main(engine, files, mode, args.description)


if __name__ == '__main__':
    sys.exit(main())
