"""
ShelfSort — sort small product catalogs with interchangeable comparison strategies.

Core features:
- Four comparators: price, sales count, sales per view, creation date
- Ascending/descending direction per comparator (creation date is ascending only)
- Explicit zero-views policy for the sales-per-view ratio
- Plain-text item report and a CLI for headless usage
"""

# Get version
try:
    from importlib.metadata import version as _version
    __version__ = _version("shelfsort")
except Exception:
    import tomllib
    from pathlib import Path

    with open(Path(__file__).resolve().parents[2] / "pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

# Public API — only what users should import directly
from shelfsort.commands import SortCommand
from shelfsort.core import (
    Catalog, Product, Ordering, SortField, SortParams, ZeroViewsPolicy,
    ComparatorStrategy, PriceComparator, SalesPerViewComparator,
    SalesCountComparator, CreatedAtComparator,
    ShelfSortError, InvalidArgumentError, DivisionAmbiguityError, MalformedDateError)
from shelfsort.utils.convert_utils import ConvertUtils
from shelfsort.services import ProductLoader, ReportService

__all__ = [
    "SortCommand",
    "Catalog",
    "Product",
    "Ordering",
    "SortField",
    "SortParams",
    "ZeroViewsPolicy",
    "ComparatorStrategy",
    "PriceComparator",
    "SalesPerViewComparator",
    "SalesCountComparator",
    "CreatedAtComparator",
    "ShelfSortError",
    "InvalidArgumentError",
    "DivisionAmbiguityError",
    "MalformedDateError",
    "ConvertUtils",
    "ProductLoader",
    "ReportService",
    "__version__",
]
