"""Domain constants for the wallet tracker."""

DEFAULT_RUN_HOUR = 9

# Upper bound on catch-up iterations for a single schedule (~270 years daily).
MAX_CATCH_UP_OCCURRENCES = 100_000

AUTO_NOTE_PREFIX = "[Auto]"
RUN_NOW_NOTE_PREFIX = "[Run now]"

DELETED_WALLET_LABEL = "Deleted Wallet"
DELETED_CATEGORY_LABEL = "Deleted Category"
UNCATEGORIZED_LABEL = "Uncategorized"
TRANSFER_LABEL = "Transfer"

DEFAULT_WALLET_TYPES = (
    "Bank Account",
    "Touch & Go E-Wallet",
    "Touch & Go Card (NFC)",
    "Wise Account",
    "Cash",
    "Credit Card",
    "Investment Account",
    "Crypto Wallet",
    "ShopeePay",
    "GrabPay",
)

# (id, name, icon_name, color, type)
DEFAULT_CATEGORY_ROWS = (
    ("cat-food", "Food & Dining", "Utensils", "#f97316", "EXPENSE"),
    ("cat-transport", "Transport", "Car", "#3b82f6", "EXPENSE"),
    ("cat-shopping", "Shopping", "ShoppingBag", "#ec4899", "EXPENSE"),
    ("cat-bills", "Bills & Utilities", "Receipt", "#ef4444", "EXPENSE"),
    ("cat-entertainment", "Entertainment", "Film", "#8b5cf6", "EXPENSE"),
    ("cat-health", "Health", "HeartPulse", "#10b981", "EXPENSE"),
    ("cat-salary", "Salary", "Briefcase", "#22c55e", "INCOME"),
    ("cat-freelance", "Freelance", "Laptop", "#06b6d4", "INCOME"),
    ("cat-investment", "Investment", "TrendingUp", "#eab308", "INCOME"),
    ("cat-gift", "Gift", "Gift", "#f43f5e", "INCOME"),
)

DEFAULT_WALLET_ROW = ("w-1", "Main Savings", "0", "Bank Account", "#3b82f6")


__all__ = [
    "DEFAULT_RUN_HOUR",
    "MAX_CATCH_UP_OCCURRENCES",
    "AUTO_NOTE_PREFIX",
    "RUN_NOW_NOTE_PREFIX",
    "DELETED_WALLET_LABEL",
    "DELETED_CATEGORY_LABEL",
    "UNCATEGORIZED_LABEL",
    "TRANSFER_LABEL",
    "DEFAULT_WALLET_TYPES",
    "DEFAULT_CATEGORY_ROWS",
    "DEFAULT_WALLET_ROW",
]
