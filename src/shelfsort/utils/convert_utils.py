"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

utils/convert_utils.py
"""
from datetime import date, datetime
from decimal import Decimal
from typing import Any


class ConvertUtils:
    @staticmethod
    def number_to_display(value: float) -> str:
        """
        Convert a float to a short display string (e.g., 10.0 -> '10', 12.99 -> '12.99').
        Uses up to 14 significant digits, so binary noise like 0.1 + 0.2 stays hidden.
        """
        if value != value:
            return "NaN"
        if value in (float("inf"), float("-inf")):
            return "INF" if value > 0 else "-INF"

        text = "%.14G" % value
        if "E" in text:
            mantissa, exponent = text.split("E")
            return f"{mantissa}E{int(exponent):+d}"
        return text

    @staticmethod
    def value_to_display(value: Any) -> str:
        """
        Convert any record field value to the text shown in reports.
        Strings and integers are shown as is.
        """
        if isinstance(value, float):
            return ConvertUtils.number_to_display(value)
        if isinstance(value, Decimal):
            return format(value, "f")
        if isinstance(value, date):
            return value.isoformat(sep=" ") if isinstance(value, datetime) else value.isoformat()
        if value is None:
            return ""
        return str(value)
