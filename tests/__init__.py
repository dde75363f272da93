"""
Test suite for monads

Contains:
- tests/unit/          : Unit tests for individual modules
"""
