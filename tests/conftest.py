"""
Shared fixtures for shelfsort tests.
Provides the three-table sample catalog plus products with edge-case values.
"""
import json
import pytest
from pathlib import Path
from typing import List
import sys

# Add src/ to sys.path so 'shelfsort' package is importable without installation
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from shelfsort.core.models import Product


@pytest.fixture
def sample_products() -> List[Product]:
    """
    The three tables used throughout the examples:
    id | price | created    | sales | views | sales/views
    1  | 12.99 | 2019-01-04 | 32    | 730   | ~0.0438
    2  | 44.49 | 2012-01-04 | 301   | 3279  | ~0.0918
    3  | 10.00 | 2014-05-28 | 1048  | 20123 | ~0.0521
    """
    return [
        Product(id=1, name="Alabaster Table", price=12.99, created="2019-01-04",
                sales_count=32, views_count=730),
        Product(id=2, name="Zebra Table", price=44.49, created="2012-01-04",
                sales_count=301, views_count=3279),
        Product(id=3, name="Coffee Table", price=10.00, created="2014-05-28",
                sales_count=1048, views_count=20123),
    ]


@pytest.fixture
def zero_view_products() -> List[Product]:
    """Products mixing regular ratios with zero-view records."""
    return [
        Product(id=1, name="Regular", price=5.0, created="2020-01-01", sales_count=10, views_count=100),
        Product(id=2, name="Sold unseen", price=5.0, created="2020-01-01", sales_count=3, views_count=0),
        Product(id=3, name="Never touched", price=5.0, created="2020-01-01", sales_count=0, views_count=0),
        Product(id=4, name="Popular", price=5.0, created="2020-01-01", sales_count=50, views_count=100),
    ]


@pytest.fixture
def products_json(tmp_path, sample_products) -> Path:
    """JSON file holding the sample catalog in shuffled order."""
    data = [p.to_dict() for p in reversed(sample_products)]
    path = tmp_path / "products.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path
