"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/report_service.py
Plain-text report of an ordered product list.
"""
import sys
from typing import List, Optional, TextIO

from shelfsort.core.models import Product
from shelfsort.utils.convert_utils import ConvertUtils

SEPARATOR = "-" * 31
INDENT = "    "


class ReportService:
    @staticmethod
    def format_products(products: List[Product]) -> str:
        """
        Render products in the given order.

        Each product gets an 'Item N:' header (1-indexed), one indented
        'field: value' line per field and a blank line.
        A dashed separator line closes the report.

        Args:
            products (List[Product]): Products in display order.

        Returns:
            str: Report text ending with a newline.
        """
        lines = []
        for index, product in enumerate(products, 1):
            lines.append(f"Item {index}:")
            for field_name, value in product.to_dict().items():
                lines.append(f"{INDENT}{field_name}: {ConvertUtils.value_to_display(value)}")
            lines.append("")
        lines.append(SEPARATOR)
        return "\n".join(lines) + "\n"

    @staticmethod
    def display_products(products: List[Product], stream: Optional[TextIO] = None) -> None:
        """Write the report to stream (stdout by default)."""
        if stream is None:
            stream = sys.stdout
        stream.write(ReportService.format_products(products))
        stream.flush()
