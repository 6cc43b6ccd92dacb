"""Validation domain exports."""

from .key_matching import find_rule, key_matches
from .validator import validate_document
from .value_checks import BOOLEAN_VALUES, value_conforms
from .violation_models import Violation, ViolationReason

__all__ = [
    "BOOLEAN_VALUES",
    "Violation",
    "ViolationReason",
    "find_rule",
    "key_matches",
    "value_conforms",
    "validate_document",
]
