"""
Domain models and value objects.

Contains the ternary Digit and the Term (minterm / implicant) value object.
"""

from src.core.domain.digit import Digit
from src.core.domain.term import Term, TermState

__all__ = [
    # Digit
    "Digit",
    # Term model
    "Term",
    "TermState",
]
