from shelfsort.core.models import SortField, ZeroViewsPolicy

SORT_ALIASES = {
    "price": SortField.PRICE,
    "sales-per-view": SortField.SALES_PER_VIEW,
    "spv": SortField.SALES_PER_VIEW,
    "sales-count": SortField.SALES_COUNT,
    "sales": SortField.SALES_COUNT,
    "created": SortField.CREATED_AT,
    "date": SortField.CREATED_AT,
}

SORT_CHOICES = list(SORT_ALIASES.keys())

SORT_HELP_TEXT = (
    "Field to sort products by:\n"
    "  price          : Product price\n"
    "  sales-per-view : Sales count divided by views count (alias: spv)\n"
    "  sales-count    : Number of sales (alias: sales)\n"
    "  created        : Creation date, ascending only (alias: date)\n"
    "Default: price"
)

ZERO_VIEWS_ALIASES = {
    "infinite": ZeroViewsPolicy.INFINITE,
    "lowest": ZeroViewsPolicy.LOWEST,
    "raise": ZeroViewsPolicy.RAISE,
}

ZERO_VIEWS_CHOICES = list(ZERO_VIEWS_ALIASES.keys())

ZERO_VIEWS_HELP_TEXT = (
    "Sales-per-view ratio for products with zero views:\n"
    "  infinite : Sold but never viewed ranks highest, 0/0 counts as 0 (default)\n"
    "  lowest   : Every zero-view product ranks lowest\n"
    "  raise    : Stop with an error"
)

EPILOG_TEXT = """
Examples:
  Sort the built-in sample catalog by price, most expensive first
  %(prog)s --sort price --desc

  Sort products from a JSON file by sales per view
  %(prog)s -i products.json -s sales-per-view

  Oldest products first
  %(prog)s -i products.json -s created
"""
