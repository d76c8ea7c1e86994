"""
Sorting core — product model, comparator strategies and the catalog.

This package contains the pure foundation of shelfsort:
- Product: immutable product record
- ComparatorStrategy: price, sales count, sales-per-view and creation date orderings
- Catalog: product collection sorted on demand by an injected strategy
- Errors: InvalidArgumentError, DivisionAmbiguityError, MalformedDateError

No I/O and no CLI dependencies, so it can be embedded in other services.
"""

from .errors import ShelfSortError, InvalidArgumentError, DivisionAmbiguityError, MalformedDateError
from .models import Product, Ordering, SortField, SortParams, ZeroViewsPolicy
from .comparators import (
    ComparatorStrategy, PriceComparator, SalesPerViewComparator,
    SalesCountComparator, CreatedAtComparator)
from .catalog import Catalog

__all__ = [
    "ShelfSortError",
    "InvalidArgumentError",
    "DivisionAmbiguityError",
    "MalformedDateError",
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
    "Catalog",
]
