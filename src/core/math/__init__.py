"""
Core math modules

Проверки предусловий, точная комбинаторика и базовые формулы теории вероятностей.
"""

# Preconditions
from src.core.math.preconditions import (
    # Constants
    JOINT_PROBABILITY_TOLERANCE,
    # Exceptions
    ValidationError,
    # Checks
    validate_equal_length,
    validate_integer,
    validate_joint_probability_table,
    validate_min_size,
    validate_non_negative_items,
    validate_non_negative_rate,
    validate_non_negative_successes,
    validate_non_negative_trials,
    validate_non_zero,
    validate_non_zero_successes,
    validate_non_zero_trials,
    validate_probability,
    validate_range,
    validate_subset_size,
    validate_successes_within_trials,
    validate_table_indices,
)

# Combinatorics
from src.core.math.combinatorics import (
    combinations,
    factorial,
    permutations,
)

__all__ = [
    # Preconditions — Constants
    "JOINT_PROBABILITY_TOLERANCE",
    # Preconditions — Exceptions
    "ValidationError",
    # Preconditions — Checks
    "validate_equal_length",
    "validate_integer",
    "validate_joint_probability_table",
    "validate_min_size",
    "validate_non_negative_items",
    "validate_non_negative_rate",
    "validate_non_negative_successes",
    "validate_non_negative_trials",
    "validate_non_zero",
    "validate_non_zero_successes",
    "validate_non_zero_trials",
    "validate_probability",
    "validate_range",
    "validate_subset_size",
    "validate_successes_within_trials",
    "validate_table_indices",
    # Combinatorics
    "combinations",
    "factorial",
    "permutations",
]
