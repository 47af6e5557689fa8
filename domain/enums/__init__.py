"""Domain enumerations."""
from .failure_kind import FailureKind

__all__ = [
    'FailureKind',
]
