"""Conversion helpers shared by services and the CLI."""

from .convert_utils import ConvertUtils

__all__ = ["ConvertUtils"]
