"""Utility exports."""

from .config import BitwiseConfig
from .logging import get_logger
from .validation import ensure_callable, ensure_int, ensure_iterator, ensure_sequence

__all__ = [
    "BitwiseConfig",
    "get_logger",
    "ensure_callable",
    "ensure_int",
    "ensure_iterator",
    "ensure_sequence",
]
