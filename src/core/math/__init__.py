"""
Core math modules

Числовые предикаты, чётность и агрегация последовательностей.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    float_divide,
    is_integral,
    is_real_number,
    is_sequence,
    is_valid_float,
    to_float,
    validate_real,
    validate_real_sequence,
)

# Parity
from src.core.math.parity import (
    ParityDomainViolation,
    is_even,
    is_odd,
)

# Aggregation
from src.core.math.aggregation import (
    EmptyInputError,
    aggregate,
    average,
    square_all,
    sum_all,
)

__all__ = [
    # Numerical Safeguards — Predicates
    "is_integral",
    "is_real_number",
    "is_sequence",
    "is_valid_float",
    # Numerical Safeguards — Float conversion
    "float_divide",
    "to_float",
    # Numerical Safeguards — Validation
    "validate_real",
    "validate_real_sequence",
    # Parity — Exceptions
    "ParityDomainViolation",
    # Parity — Functions
    "is_even",
    "is_odd",
    # Aggregation — Exceptions
    "EmptyInputError",
    # Aggregation — Functions
    "aggregate",
    "average",
    "square_all",
    "sum_all",
]
