# cli.py: command-line front end for chunk-split
# Splits files into numbered chunk files, lists existing chunks, summarizes traces.

import argparse
import logging
import re
import sys
from pathlib import Path
from typing import Optional, List

# Local module imports
from chunk_split.core.splitter import split_file
from chunk_split.core.observe import TraceSink
from chunk_split.tools.chunk_listing import list_chunks, missing_indices
from chunk_split.tools.trace_analyse import analyze, format_summary

logger = logging.getLogger("chunk_split")

DEFAULT_CHUNK_SIZE = 50 * 1024 * 1024

_UNITS = {"": 1, "K": 1024, "M": 1024 ** 2, "G": 1024 ** 3}
_SIZE_RE = re.compile(r"^\s*(\d+)\s*([KMG]?)(?:I?B)?\s*$", re.IGNORECASE)


# -----------------------------------------------------------------------------
# Utilities
# -----------------------------------------------------------------------------

def parse_size(text: str) -> int:
    """Parse '4096', '64K', '10MB', '1GiB' into bytes."""
    m = _SIZE_RE.match(text)
    if not m:
        raise argparse.ArgumentTypeError(f"invalid size: {text!r}")
    return int(m.group(1)) * _UNITS[m.group(2).upper()]


# -----------------------------------------------------------------------------
# Command handlers
# -----------------------------------------------------------------------------

def cmd_split(args: argparse.Namespace) -> int:
    trace = TraceSink(path=args.trace_file) if args.trace_file else None

    def report(index: int, path: str, nbytes: int):
        logger.info("chunk %d: %s (%d bytes)", index, path, nbytes)

    try:
        paths = split_file(
            args.source,
            args.size,
            args.out_dir,
            overwrite=not args.no_overwrite,
            on_chunk=report,
            trace=trace,
        )
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    out_dir = args.out_dir or "."
    print(f"Split '{args.source}' → '{out_dir}' into {len(paths)} chunks of at most {args.size} bytes.")
    if args.trace_file:
        print(f"Trace written to '{args.trace_file}' ({trace.count} events)")
    return 0


def cmd_list(args: argparse.Namespace) -> int:
    try:
        paths = list_chunks(args.dir, args.source)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not paths:
        print(f"No chunks of '{Path(args.source).name}' found in '{args.dir or '.'}'")
        return 1

    for p in paths:
        print(p)
    gaps = missing_indices(paths, args.source)
    if gaps:
        print(f"Missing indices: {', '.join(str(i) for i in gaps)}")
    return 0


def cmd_trace(args: argparse.Namespace) -> int:
    try:
        summary = analyze(args.trace_file)
    except (OSError, ValueError) as e:
        print(f"Error: cannot read trace '{args.trace_file}': {e}", file=sys.stderr)
        return 1
    print(format_summary(summary))
    return 0


# -----------------------------------------------------------------------------
# Argument parsing
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Split files into fixed-size chunk files")
    sub = p.add_subparsers(dest="cmd", required=True)

    # split
    ps = sub.add_parser("split", help="Split a file into numbered chunk files")
    ps.add_argument("source", help="File to split")
    ps.add_argument("-s", "--size", type=parse_size, default=DEFAULT_CHUNK_SIZE,
                    help="Chunk size in bytes, K/M/G suffixes allowed (default: 50M)")
    ps.add_argument("-o", "--out-dir", default="", help="Output directory (default: current directory)")
    ps.add_argument("--no-overwrite", action="store_true", help="Fail instead of overwriting existing chunk files")
    ps.add_argument("--trace-file", help="Write JSONL chunk events to file")
    ps.add_argument("-v", "--verbose", action="store_true", help="Log every chunk written to stderr")

    # list
    pl = sub.add_parser("list", help="List chunk files of a source already on disk")
    pl.add_argument("source", help="Source file name the chunks were made from")
    pl.add_argument("-d", "--dir", default="", help="Directory holding the chunks (default: current directory)")

    # trace
    pt = sub.add_parser("trace", help="Summarize a JSONL trace written by 'split --trace-file'")
    pt.add_argument("trace_file", help="Trace file path")

    return p


# -----------------------------------------------------------------------------
# Main
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO if getattr(args, "verbose", False) else logging.WARNING)

    if args.cmd == "split":
        return cmd_split(args)
    elif args.cmd == "list":
        return cmd_list(args)
    elif args.cmd == "trace":
        return cmd_trace(args)
    else:
        parser.error("Unknown command")
        return 2


if __name__ == "__main__":
    sys.exit(main())
