from .register_service import RegisterResult, RegisterService, build_item
from .summary_service import Balance, CategoryTotal, SummaryService
from .validation import InputValidator

__all__ = [
    "Balance",
    "CategoryTotal",
    "InputValidator",
    "RegisterResult",
    "RegisterService",
    "SummaryService",
    "build_item",
]
