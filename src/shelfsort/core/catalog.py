"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/catalog.py
Product catalog delegating ordering to an injected comparator strategy.
"""
import logging
from typing import Iterable, Iterator, List, Optional

from shelfsort.core.comparators import ComparatorStrategy
from shelfsort.core.errors import InvalidArgumentError
from shelfsort.core.models import Product

logger = logging.getLogger(__name__)


class Catalog:
    """
    Holds a fixed collection of products.
    get_products() never changes the held collection: every call sorts its own copy,
    so the same catalog can be sorted by several strategies one after another.
    """

    def __init__(self, products: Iterable[Product]):
        self._products = tuple(products)

    def get_products(self, strategy: Optional[ComparatorStrategy]) -> List[Product]:
        """
        Retrieve the products ordered by the given strategy.

        Args:
            strategy: Comparator used to order the products

        Returns:
            New list of products in sorted order

        Raises:
            InvalidArgumentError: If strategy is missing
            DivisionAmbiguityError, MalformedDateError: Propagated from the comparator
        """
        if strategy is None:
            raise InvalidArgumentError("Sorting strategy is required")
        if not isinstance(strategy, ComparatorStrategy):
            raise InvalidArgumentError(f"Not a sorting strategy: {strategy!r}")

        logger.debug(f"Catalog of {len(self._products)} products sorted by {strategy.name}")
        return strategy.sort(self._products)

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)

    def __repr__(self):
        return f"<Catalog count={len(self._products)}>"
