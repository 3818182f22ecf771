"""
Test suite for complex-pair

Contains:
- tests/unit/          : Unit tests for c32/c64 and the capability abstractions
"""
