"""
Test suite for the Complex value type

Contains:
- tests/unit/          : Unit tests for individual modules
"""
