"""
Core value types and mathematical primitives.

This module contains the foundational building blocks: IEEE-754 scalar
helpers, component formats and the Complex value type.
"""
