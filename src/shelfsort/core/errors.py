"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/errors.py
Exceptions raised by the sorting core. All of them derive from ShelfSortError,
so callers can catch the whole family at once.
"""


class ShelfSortError(Exception):
    """Base class for all shelfsort errors."""


class InvalidArgumentError(ShelfSortError, ValueError):
    """A required argument is missing or a value is out of its allowed range."""


class DivisionAmbiguityError(ShelfSortError, ArithmeticError):
    """Sales-per-view ratio requested for a product with zero views."""

    def __init__(self, product_id: int):
        self.product_id = product_id
        super().__init__(f"Product {product_id} has zero views: sales-per-view ratio is undefined")


class MalformedDateError(ShelfSortError, ValueError):
    """Creation date of a product cannot be parsed."""

    def __init__(self, product_id: int, value):
        self.product_id = product_id
        self.value = value
        super().__init__(f"Product {product_id} has malformed creation date: {value!r}")
