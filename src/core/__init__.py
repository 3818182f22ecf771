"""
Core numeric primitives.

Complex value types of fixed precision and the capability abstractions
that let numeric code be written once for either precision.
"""
