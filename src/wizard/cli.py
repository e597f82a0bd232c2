#!/usr/bin/env python3
"""CLI interface for the SPDX guide."""

import argparse
from pathlib import Path
from typing import TextIO

from rich.markup import escape

from common.env import env
from common.logger import console, error, progress, setup_logging, success, warning
from vcs import detect_vcs

from .context import WizardContext
from .engine import Wizard
from .messages import Messages
from .prompts import Prompter


def run_guide(
    directory: Path,
    filename: str,
    messages: Messages | None = None,
    stream: TextIO | None = None,
) -> bool:
    """Detect version control in ``directory`` and run the interview.

    Args:
        directory: Directory to describe; the SPDX file is written here
        filename: Output file name, relative to ``directory``
        messages: String catalog, defaults to English
        stream: Optional input stream for answers instead of stdin

    Returns:
        True if the document was written
    """
    messages = messages or Messages()

    shown_dir = f"[guide.path]{escape(str(directory))}[/guide.path]"
    progress(messages.get("detecting-vcs", dir=shown_dir))
    snapshot = detect_vcs(directory)
    if snapshot is None:
        warning(messages.get("no-vcs"))
    else:
        progress(messages.get("found-vcs", name=f"[guide.vcs]{snapshot.vcs_name}[/guide.vcs]"))

    context = WizardContext(
        vcs=snapshot,
        prompter=Prompter(console, stream=stream),
        console=console,
        messages=messages,
        directory=directory,
        filename=filename,
        license_list_version=env.license_list_version(),
    )
    if not Wizard(context).run():
        return False

    success(messages.get("file-created", path=escape(str(context.output_path))))
    return True


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = argparse.ArgumentParser(
        prog="spdx-guide",
        description="Interactively create an SPDX document for a package",
    )
    parser.add_argument(
        "-d",
        "--dir",
        type=Path,
        default=Path("."),
        help="Directory to run spdx-guide in (default: current directory)",
    )
    parser.add_argument(
        "-f",
        "--file",
        type=str,
        default=env.output_filename(),
        help="SPDX file to generate, relative to --dir (default: LICENSE.spdx)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug logging",
    )
    args = parser.parse_args(argv)

    setup_logging(level="DEBUG" if args.verbose else env.log_level())

    if not args.dir.is_dir():
        error(f"{escape(str(args.dir))} is not a directory")
        return 1

    if run_guide(args.dir.resolve(), args.file):
        return 0
    return 1


if __name__ == "__main__":
    exit(main())
