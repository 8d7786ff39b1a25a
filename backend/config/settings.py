LEDGER_EXPORT_FILENAME = "discount_history.csv"

# History paging
DEFAULT_HISTORY_LIMIT = 10
MAX_HISTORY_LIMIT = 100
