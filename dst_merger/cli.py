"""Command-line interface for the DST Word Merger.

WHY: Users need a simple way to turn a word into one embroidery file from
the terminal. The CLI wires together the full pipeline (word validation,
letter fetching, merging, file saving) behind a single command.

HOW: Uses argparse to accept the word, the letter library location (local
folder or base URL), and the output location. Runs the async fetch via
asyncio.run(), then saves {WORD}.dst. Status messages go to stderr so
--stdout output can be piped straight to a file or a machine.

RULES:
- Positional argument: the word (non A–Z characters are dropped)
- --letters-dir / --base-url override DST_LETTER_ROOT / DST_LETTER_BASE_URL
- Output naming: {WORD}.dst, numeric suffix for conflicts (HELLO-2.dst)
- --stdout writes the DST bytes to stdout instead of a file
- Status output goes to stderr (not stdout)
- Exit codes: 0 success, 1 merge/validation error, 130 cancelled
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

from dst_merger import __version__
from dst_merger.config import load_letter_source
from dst_merger.core.errors import DesignMergeError
from dst_merger.core.ir import MergedDesign
from dst_merger.sources.base import build_word


def _status(msg: str) -> None:
    """Print a status message to stderr, flushed immediately."""
    print(msg, file=sys.stderr, flush=True)


def _resolve_output_path(filename: str, output_dir: Path) -> Path:
    """Resolve the output file path, adding numeric suffix on conflict.

    WHY: Users may merge the same word several times while testing thread
    settings. Overwriting an earlier file would lose it.

    RULES:
    - First attempt: {filename} (e.g. HELLO.dst)
    - Conflict: insert counter before the extension (HELLO-2.dst)
    - Counter starts at 2 and increments
    """
    base_path = output_dir / filename
    if not base_path.exists():
        return base_path

    stem = base_path.stem
    ext = base_path.suffix

    counter = 2
    while True:
        candidate = output_dir / "{}-{}{}".format(stem, counter, ext)
        if not candidate.exists():
            return candidate
        counter += 1


def _save_output(design: MergedDesign, output_dir: Path) -> Path:
    """Write the merged design to a conflict-free path and return it."""
    path = _resolve_output_path(design.filename, output_dir)
    path.write_bytes(design.data)
    return path


async def _run_pipeline(args: argparse.Namespace) -> None:
    """Execute fetch → merge → save for one word.

    RULES:
    - Output directory is checked before any letter is fetched
    - No file is written unless every letter was fetched and merged
    """
    output_dir = Path(args.output_dir).resolve() if args.output_dir else Path.cwd()
    if not args.stdout and not output_dir.is_dir():
        print("Error: Output directory does not exist: {}".format(output_dir), file=sys.stderr)
        sys.exit(1)

    source = load_letter_source(letters_dir=args.letters_dir, base_url=args.base_url)

    try:
        _status("Fetching letters from {}...".format(source.name))
        async with source:
            design = await build_word(args.word, source)

        _status("  Merged {} letter(s): {} stitches, {} bytes".format(
            len(design.word), design.stitch_count, len(design),
        ))

        if args.stdout:
            sys.stdout.buffer.write(design.data)
            sys.stdout.buffer.flush()
            return

        saved_path = _save_output(design, output_dir)
        _status("Done! Saved {}".format(saved_path))

    except KeyboardInterrupt:
        _status("\nCancelled by user.")
        sys.exit(130)
    except (DesignMergeError, ValueError) as e:
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable: tests can inspect the parser without running the pipeline.
    """
    parser = argparse.ArgumentParser(
        prog="dst_merger",
        description="Merge single-letter DST embroidery designs into one "
                    "design that stitches a whole word.",
    )

    parser.add_argument(
        "word",
        help="Word to stitch: 1-12 letters A-Z (other characters are ignored).",
    )

    parser.add_argument(
        "--letters-dir",
        default=None,
        help="Letter library folder containing letters1/ ... letters1112/ "
             "(default: $DST_LETTER_ROOT or ./letters).",
    )

    parser.add_argument(
        "--base-url",
        default=None,
        help="Fetch letters from this URL instead of a local folder "
             "(default: $DST_LETTER_BASE_URL).",
    )

    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory to save the merged design (default: current directory).",
    )

    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Write the merged DST bytes to stdout instead of a file.",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log pipeline details to stderr.",
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s {}".format(__version__),
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    asyncio.run(_run_pipeline(args))


if __name__ == "__main__":
    main()
