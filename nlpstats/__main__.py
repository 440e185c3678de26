"""
Command line help for nlpstats

    python -m nlpstats statuses
    python -m nlpstats fields
"""
import argparse
import sys

from . import __version__
from .stats import FIELDS, HEADER_LABELS
from .statuses import show_statuses


def _show_fields(out):
    out.write("FIELDS:\n")
    for name, (_, kind) in FIELDS.items():
        label = HEADER_LABELS.get(name)
        label = label.strip() if label is not None else "-"
        out.write(f"  {name:<22} {kind.value:<5} {label}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nlpstats",
        description="List the statuses and table fields known to nlpstats.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("statuses", help="list valid solver statuses")
    sub.add_parser("fields", help="list fields usable in statshead/statsline")
    return parser


def main(argv=None, out=None) -> int:
    if out is None:
        out = sys.stdout
    args = build_parser().parse_args(argv)
    if args.command == "statuses":
        show_statuses(out)
    else:
        _show_fields(out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
