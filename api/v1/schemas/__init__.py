"""Re-export individual schema modules for easy imports."""

from .rec import MacrosOut, RecRequest, RecResponse

__all__ = [
    "MacrosOut",
    "RecRequest",
    "RecResponse",
]
