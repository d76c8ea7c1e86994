"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/product_loader.py
Builds product lists for the command line: from a JSON file or the built-in sample catalog.
"""
import json
import logging
from pathlib import Path
from typing import Any, List

from shelfsort.core.errors import InvalidArgumentError
from shelfsort.core.models import Product

logger = logging.getLogger(__name__)

SAMPLE_PRODUCTS = [
    {
        'id': 1,
        'name': 'Alabaster Table',
        'price': 12.99,
        'created': '2019-01-04',
        'sales_count': 32,
        'views_count': 730,
    },
    {
        'id': 2,
        'name': 'Zebra Table',
        'price': 44.49,
        'created': '2012-01-04',
        'sales_count': 301,
        'views_count': 3279,
    },
    {
        'id': 3,
        'name': 'Coffee Table',
        'price': 10.00,
        'created': '2014-05-28',
        'sales_count': 1048,
        'views_count': 20123,
    },
]


class ProductLoader:
    @staticmethod
    def sample_products() -> List[Product]:
        """Three-table demo catalog."""
        return [Product.from_dict(item) for item in SAMPLE_PRODUCTS]

    @staticmethod
    def from_records(records: Any) -> List[Product]:
        """
        Convert a list of dicts into products.
        Raises InvalidArgumentError on a non-list input, a non-dict item or duplicate ids.
        """
        if not isinstance(records, list):
            raise InvalidArgumentError("Product data must be a list of objects")

        products = []
        seen_ids = set()
        for position, record in enumerate(records, 1):
            if not isinstance(record, dict):
                raise InvalidArgumentError(f"Item {position} is not an object")
            product = Product.from_dict(record)
            if product.id in seen_ids:
                raise InvalidArgumentError(f"Duplicate product id: {product.id}")
            seen_ids.add(product.id)
            products.append(product)
        return products

    @staticmethod
    def from_json_file(file_path: str) -> List[Product]:
        """Load products from a JSON array file."""
        path = Path(file_path)
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {path}")

        logger.debug(f"Loading products from {path}")
        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidArgumentError(f"Invalid JSON in {path}: {e}") from e

        products = ProductLoader.from_records(data)
        logger.debug(f"Loaded {len(products)} products")
        return products
