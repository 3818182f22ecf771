"""
Core math modules для complex-pair

Комплексные числа фиксированной точности и абстракции числовых возможностей.
"""

# Numeric capability abstractions
from src.core.math.number import (
    REAL_SCALAR_TYPES,
    Complex,
    ComplexT,
    Number,
    Real,
    is_real,
)

# Concrete complex types
from src.core.math.complex_types import (
    IM_FIELD,
    RE_FIELD,
    c32,
    c64,
    pair_dtype,
)

__all__ = [
    # Abstractions — Constants
    "REAL_SCALAR_TYPES",
    # Abstractions — Types
    "Number",
    "Real",
    "Complex",
    "ComplexT",
    # Abstractions — Functions
    "is_real",
    # Complex types — Constants
    "RE_FIELD",
    "IM_FIELD",
    # Complex types — Types
    "c32",
    "c64",
    # Complex types — Functions
    "pair_dtype",
]
