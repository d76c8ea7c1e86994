"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for product sorting: the product record, ordering results,
sort fields and validated sort parameters.
"""

import math
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Union

from shelfsort.core.errors import InvalidArgumentError


# =============================
# Enums
# =============================

class Ordering(Enum):
    """Result of comparing two products under a given comparator."""
    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, left: Any, right: Any) -> 'Ordering':
        """Three-way comparison of two keys."""
        if left < right:
            return cls.LESS
        if left > right:
            return cls.GREATER
        return cls.EQUAL

    def reversed(self) -> 'Ordering':
        return Ordering(-self.value)


class SortField(Enum):
    PRICE = "price"
    SALES_PER_VIEW = "sales-per-view"
    SALES_COUNT = "sales-count"
    CREATED_AT = "created"

    @property
    def display_name(self) -> str:
        """Human-readable name for report headers."""
        mapping = {
            SortField.PRICE: "Price",
            SortField.SALES_PER_VIEW: "Sales per View",
            SortField.SALES_COUNT: "Sales Count",
            SortField.CREATED_AT: "Creation Date",
        }
        return mapping.get(self, self.value)

    @property
    def supports_direction(self) -> bool:
        """Creation date ordering is ascending only."""
        return self is not SortField.CREATED_AT


class ZeroViewsPolicy(Enum):
    """
    How the sales-per-view ratio is computed for a product with zero views.
    INFINITE: sales > 0 gives +inf, 0 sales gives 0.0
    LOWEST:   always -inf (ranks first ascending, last descending)
    RAISE:    DivisionAmbiguityError
    """
    INFINITE = "infinite"
    LOWEST = "lowest"
    RAISE = "raise"

    def __repr__(self) -> str:
        return self.value


# ======================
#  Core Data Models
# ======================

Number = Union[int, float, Decimal]
DateLike = Union[date, str]


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class Product:
    """
    A single product record.
    Immutable: comparators and the catalog only read its fields.
    'created' is kept as given (date, datetime or ISO string) and parsed
    only when a date ordering is requested.
    """
    id: int
    name: str
    price: Number
    created: DateLike
    sales_count: int
    views_count: int

    def __post_init__(self):
        """Validate field types and ranges right after creation."""
        if not _is_int(self.id):
            raise InvalidArgumentError(f"Product id must be an integer, got {self.id!r}")

        if isinstance(self.price, bool) or not isinstance(self.price, (int, float, Decimal)):
            raise InvalidArgumentError(f"Product {self.id}: price must be a number, got {self.price!r}")
        finite = self.price.is_finite() if isinstance(self.price, Decimal) else math.isfinite(self.price)
        if not finite:
            raise InvalidArgumentError(f"Product {self.id}: price must be finite, got {self.price!r}")
        if self.price < 0:
            raise InvalidArgumentError(f"Product {self.id}: price cannot be negative")

        for field_name in ("sales_count", "views_count"):
            value = getattr(self, field_name)
            if not _is_int(value):
                raise InvalidArgumentError(f"Product {self.id}: {field_name} must be an integer, got {value!r}")
            if value < 0:
                raise InvalidArgumentError(f"Product {self.id}: {field_name} cannot be negative")

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'price': self.price,
            'created': self.created,
            'sales_count': self.sales_count,
            'views_count': self.views_count,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Product':
        """Reconstruct Product from dict (after loading from JSON)"""
        try:
            return cls(
                id=data['id'],
                name=data['name'],
                price=data['price'],
                created=data['created'],
                sales_count=data['sales_count'],
                views_count=data['views_count'],
            )
        except KeyError as e:
            raise InvalidArgumentError(f"Product record is missing field {e}") from e

    def __repr__(self):
        return f"<Product id={self.id}, name={self.name!r}>"


# ======================
#  Sort Parameters
# ======================

@dataclass
class SortParams:
    """
    DTO for sort parameters with built-in validation.
    Interface-agnostic: built by the CLI, consumed by SortCommand.
    """
    sort_by: SortField = SortField.PRICE
    descending: bool = False
    zero_views: ZeroViewsPolicy = ZeroViewsPolicy.INFINITE

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not isinstance(self.sort_by, SortField):
            raise InvalidArgumentError(f"Unknown sort field: {self.sort_by!r}")

        if not isinstance(self.zero_views, ZeroViewsPolicy):
            raise InvalidArgumentError(f"Unknown zero views policy: {self.zero_views!r}")

        if self.descending and not self.sort_by.supports_direction:
            raise InvalidArgumentError(
                f"Sorting by {self.sort_by.display_name.lower()} supports ascending order only"
            )
