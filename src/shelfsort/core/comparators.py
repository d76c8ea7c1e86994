"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/comparators.py
Interchangeable comparison strategies for products. No dependencies outside core.
Each strategy compares two products by one derived key and produces an Ordering.
Direction (ascending/descending) is fixed at construction.
"""
import logging
from abc import ABC, abstractmethod
from datetime import date, datetime
from functools import cmp_to_key
from typing import Any, Callable, Iterable, List

from shelfsort.core.errors import DivisionAmbiguityError, InvalidArgumentError, MalformedDateError
from shelfsort.core.models import Ordering, Product, ZeroViewsPolicy

logger = logging.getLogger(__name__)


class ComparatorStrategy(ABC):
    """
    Base class for all product comparators.
    Subclasses only define key(); comparison, direction handling and sorting live here.
    """

    def __init__(self, descending: bool = False):
        self._descending = bool(descending)

    @property
    def descending(self) -> bool:
        return self._descending

    @property
    def name(self) -> str:
        direction = "desc" if self._descending else "asc"
        return f"{type(self).__name__}({direction})"

    @abstractmethod
    def key(self, product: Product) -> Any:
        """Derived value this comparator orders products by."""
        pass

    def compare(self, product_a: Product, product_b: Product) -> Ordering:
        ordering = Ordering.of(self.key(product_a), self.key(product_b))
        return ordering.reversed() if self._descending else ordering

    def sort_key(self) -> Callable[[Product], Any]:
        """Adapter for sorted()/list.sort()."""
        return cmp_to_key(lambda a, b: self.compare(a, b).value)

    def sort(self, products: Iterable[Product]) -> List[Product]:
        """Return a new list ordered by this comparator. Equal keys keep input order."""
        result = list(products)
        logger.debug(f"Sorting {len(result)} products with {self.name}")
        result.sort(key=self.sort_key())
        return result

    def __repr__(self):
        return f"<{self.name}>"


class PriceComparator(ComparatorStrategy):
    """Orders products by price."""

    def key(self, product: Product) -> Any:
        return product.price


class SalesCountComparator(ComparatorStrategy):
    """Orders products by number of sales."""

    def key(self, product: Product) -> int:
        return product.sales_count


class SalesPerViewComparator(ComparatorStrategy):
    """
    Orders products by sales_count / views_count.
    Products with zero views never reach a raw division: the ratio is resolved
    by the configured ZeroViewsPolicy.
    """

    def __init__(self, descending: bool = False, zero_views: ZeroViewsPolicy = ZeroViewsPolicy.INFINITE):
        super().__init__(descending)
        if not isinstance(zero_views, ZeroViewsPolicy):
            raise InvalidArgumentError(f"Unknown zero views policy: {zero_views!r}")
        self._zero_views = zero_views

    @property
    def zero_views(self) -> ZeroViewsPolicy:
        return self._zero_views

    def key(self, product: Product) -> float:
        if product.views_count > 0:
            return product.sales_count / product.views_count

        if self._zero_views is ZeroViewsPolicy.RAISE:
            raise DivisionAmbiguityError(product.id)
        if self._zero_views is ZeroViewsPolicy.LOWEST:
            return float("-inf")
        # INFINITE: sold without being viewed ranks highest, 0/0 ranks with a zero ratio
        return float("inf") if product.sales_count > 0 else 0.0


class CreatedAtComparator(ComparatorStrategy):
    """
    Orders products by creation date truncated to the calendar day.
    Always ascending.
    """

    def __init__(self):
        super().__init__(descending=False)

    def key(self, product: Product) -> date:
        return self.parse_created(product)

    @staticmethod
    def parse_created(product: Product) -> date:
        """Creation date of a product as a calendar day. Raises MalformedDateError."""
        value = product.created
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        if isinstance(value, str):
            try:
                return datetime.fromisoformat(value.strip()).date()
            except ValueError as e:
                raise MalformedDateError(product.id, value) from e
        raise MalformedDateError(product.id, value)
