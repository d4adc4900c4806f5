"""Domain constants for the ledger and asset valuation model."""

ACCOUNT_TYPES = (
    "ASSET",
    "LIABILITY",
    "EXPENSE",
    "REVENUE",
)

BALANCE_SHEET_ACCOUNT_TYPES = (
    "ASSET",
    "LIABILITY",
)

TRANSACTION_TYPES = (
    "INCOME",
    "EXPENSE",
)

ASSET_CATEGORIES = (
    "CASH",
    "STOCK",
    "PENSION",
    "REAL_ESTATE",
    "LOAN",
    "ESO",
    "RENTAL",
)

LIABILITY_CATEGORIES = ("LOAN",)

DEFAULT_TIMEZONE = "Asia/Seoul"

DEFAULT_ACCOUNTS = (
    ("Cash", "ASSET"),
    ("Credit Card", "LIABILITY"),
    ("Checking Account", "ASSET"),
    ("Food", "EXPENSE"),
    ("Transport", "EXPENSE"),
    ("Household", "EXPENSE"),
    ("Hobbies", "EXPENSE"),
    ("Other Expenses", "EXPENSE"),
    ("Salary", "REVENUE"),
    ("Interest Income", "REVENUE"),
)


__all__ = [
    "ACCOUNT_TYPES",
    "BALANCE_SHEET_ACCOUNT_TYPES",
    "TRANSACTION_TYPES",
    "ASSET_CATEGORIES",
    "LIABILITY_CATEGORIES",
    "DEFAULT_TIMEZONE",
    "DEFAULT_ACCOUNTS",
]
