"""
Unified command orchestrator for product sorting.
Turns validated SortParams into a comparator and runs it over a catalog.
Pure Python, no CLI dependencies.
"""
import logging
from typing import Iterable, List

from shelfsort.core.catalog import Catalog
from shelfsort.core.comparators import (
    ComparatorStrategy, CreatedAtComparator, PriceComparator,
    SalesCountComparator, SalesPerViewComparator)
from shelfsort.core.errors import InvalidArgumentError
from shelfsort.core.models import Product, SortField, SortParams

logger = logging.getLogger(__name__)


class SortCommand:
    """
    Orchestrates the sorting workflow:
    1. Build the comparator matching the params
    2. Wrap products into a Catalog
    3. Return the ordered products

    Usage:
        params = SortParams(sort_by=SortField.PRICE, descending=True)
        products = SortCommand().execute(products, params)
    """

    @staticmethod
    def build_comparator(params: SortParams) -> ComparatorStrategy:
        """
        Create the comparator for the given params.

        Raises:
            InvalidArgumentError: If params is missing
        """
        if params is None:
            raise InvalidArgumentError("Sort parameters are required")

        if params.sort_by is SortField.PRICE:
            return PriceComparator(descending=params.descending)
        if params.sort_by is SortField.SALES_PER_VIEW:
            return SalesPerViewComparator(descending=params.descending, zero_views=params.zero_views)
        if params.sort_by is SortField.SALES_COUNT:
            return SalesCountComparator(descending=params.descending)
        return CreatedAtComparator()

    def execute(self, products: Iterable[Product], params: SortParams) -> List[Product]:
        """
        Sort products with the given parameters.

        Args:
            products: Products to sort (left untouched)
            params: Validated sort parameters

        Returns:
            New list of products in sorted order

        Raises:
            InvalidArgumentError: If params is missing
            DivisionAmbiguityError: Zero views under ZeroViewsPolicy.RAISE
            MalformedDateError: Unparseable creation date when sorting by date
        """
        comparator = self.build_comparator(params)
        catalog = Catalog(products)
        logger.debug(f"Sorting {len(catalog)} products by {params.sort_by.display_name} using {comparator.name}")
        return catalog.get_products(comparator)
