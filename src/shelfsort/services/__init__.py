"""Product loading and report services."""

from .product_loader import ProductLoader
from .report_service import ReportService

__all__ = ["ProductLoader", "ReportService"]
