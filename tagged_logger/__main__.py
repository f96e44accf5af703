"""Command-line entry point for tagged-logger.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Standard library (alphabetical)
import argparse
from typing import TYPE_CHECKING

# Third-party (alphabetical)
from rich.console import Console
from rich.table import Table

# Local imports (core first, then alphabetical)
from . import __version__
from .core.categories import CATEGORY_COLORS
from .infra.environment import StaticPredicate
from .infra.sinks import RichConsoleSink
from .logger import TaggedLogger

if TYPE_CHECKING:
    from collections.abc import Sequence

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = ("main",)


# =============================================================================
# Section 12: Functions
# =============================================================================
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tagged-logger", description="Inspect the tagged-logger color palette.")
    parser.add_argument("--version", action="version", version=f"tagged-logger {__version__}")
    parser.add_argument("--palette", action="store_true", help="print one sample line per category")
    parser.add_argument("--hex", action="store_true", help="print each category with its RRGGBBAA code")
    return parser


def main(argv: Sequence[str] | None = None, *, console: Console | None = None) -> int:
    """Report the version, or render the category palette."""
    args = build_parser().parse_args(argv)
    console = console or Console()

    if args.hex:
        table = Table("category", "hex")
        for category, color in CATEGORY_COLORS.items():
            table.add_row(category.name, color.to_hex_rgba(), style=f"#{color.to_hex_rgb()}")
        console.print(table)
    if args.palette:
        sink = RichConsoleSink(console=console)
        for category in CATEGORY_COLORS:
            logger = TaggedLogger(category.name, category, sink=sink, predicate=StaticPredicate(True))
            logger.log_info(f"sample {category.value} message")
    if not (args.hex or args.palette):
        console.print(f"tagged-logger version {__version__}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
