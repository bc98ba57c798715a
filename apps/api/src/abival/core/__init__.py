"""ABIVAL Core - Type tags and validators."""

from abival.core.models import FailureCode, TypeTag

__all__ = [
    "FailureCode",
    "TypeTag",
]
