#!/usr/bin/env python3
"""
ShelfSort CLI — Command line interface for sorting product catalogs.
Loads products (from a JSON file or the built-in sample), sorts them with the chosen
strategy and prints the item report.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import sys
import os
import time
from typing import List, NoReturn
import logging

logging.basicConfig(
    level=logging.ERROR,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)
logger = logging.getLogger(__name__)

from shelfsort.core.errors import ShelfSortError
from shelfsort.core.models import Product, SortField, SortParams, ZeroViewsPolicy
from shelfsort.commands import SortCommand
from shelfsort.services.product_loader import ProductLoader
from shelfsort.services.report_service import ReportService
from shelfsort.aliases import (
    SORT_ALIASES, SORT_CHOICES, SORT_HELP_TEXT,
    ZERO_VIEWS_ALIASES, ZERO_VIEWS_CHOICES, ZERO_VIEWS_HELP_TEXT,
    EPILOG_TEXT
)


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False

        # Fix encoding for Windows consoles to prevent UnicodeEncodeError
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding='utf-8')
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding='utf-8')

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="shelfsort",
            description="ShelfSort — sort product catalogs by price, sales, sales per view or date",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        parser.add_argument(
            "--input", "-i",
            default=None,
            type=str,
            metavar='FILE',
            help="JSON file with an array of products. Default: built-in sample catalog"
        )

        # Sorting options
        parser.add_argument(
            "--sort", "-s",
            choices=SORT_CHOICES,
            default="price",
            type=str,
            metavar='FIELD',
            help=SORT_HELP_TEXT
        )
        parser.add_argument(
            "--desc", "-d",
            action="store_true",
            help="Sort in descending order (not available for 'created')"
        )
        parser.add_argument(
            "--zero-views",
            choices=ZERO_VIEWS_CHOICES,
            default="infinite",
            type=str,
            dest="zero_views",
            help=ZERO_VIEWS_HELP_TEXT
        )

        # Output options
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Suppress non-essential output"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show debug logging and timing"
        )

        return parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate command-line arguments before execution."""
        if args.quiet and args.verbose:
            self.error_exit("--quiet and --verbose cannot be used together")

        sort_by = SORT_ALIASES.get(args.sort)
        if sort_by is None:
            self.error_exit(
                f"Invalid sort field: '{args.sort}'.\n"
                f"Valid options: {', '.join(SORT_CHOICES)}"
            )
        if args.desc and not sort_by.supports_direction:
            self.error_exit(f"--desc cannot be used with --sort {args.sort} (ascending only)")

        if args.zero_views != "infinite" and sort_by is not SortField.SALES_PER_VIEW:
            self.warning("--zero-views only affects sorting by sales-per-view")

        if args.input is not None and not os.path.isfile(args.input):
            self.error_exit(f"File not found: {args.input}")

    def create_params(self, args: argparse.Namespace) -> SortParams:
        """Create SortParams from CLI arguments."""
        try:
            return SortParams(
                sort_by=SORT_ALIASES[args.sort],
                descending=args.desc,
                zero_views=ZERO_VIEWS_ALIASES.get(args.zero_views, ZeroViewsPolicy.INFINITE)
            )
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    def load_products(self, args: argparse.Namespace) -> List[Product]:
        """Load products from --input or fall back to the sample catalog."""
        if args.input is None:
            logger.debug("No input file given, using built-in sample catalog")
            return ProductLoader.sample_products()

        try:
            return ProductLoader.from_json_file(args.input)
        except (OSError, ShelfSortError) as e:
            self.error_exit(f"Failed to load products: {e}")

    def run_sort(self, products: List[Product], params: SortParams) -> List[Product]:
        """Execute sorting workflow."""
        command = SortCommand()
        try:
            return command.execute(products, params)
        except ShelfSortError as e:
            self.error_exit(f"Sorting failed: {e}")

    def output_results(self, products: List[Product], params: SortParams) -> None:
        """Print the header line (unless quiet) and the item report."""
        if not self.quiet:
            direction = "descending" if params.descending else "ascending"
            print(f"Sorted {len(products)} products by {params.sort_by.display_name} ({direction})\n")
        ReportService.display_products(products)

    def warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        if not self.quiet:
            print(f"⚠️  {message}", file=sys.stderr)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self) -> None:
        """Main entry point."""
        args = self.parse_args()
        self.verbose = args.verbose
        self.quiet = args.quiet

        self.validate_args(args)
        if self.verbose:
            logging.getLogger("shelfsort").setLevel(logging.DEBUG)

        params = self.create_params(args)
        products = self.load_products(args)
        sorted_products = self.run_sort(products, params)
        self.output_results(sorted_products, params)

        elapsed = time.time() - self.start_time
        if self.verbose:
            print(f"\n✅ Completed in {elapsed:.3f} seconds")


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)")
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
