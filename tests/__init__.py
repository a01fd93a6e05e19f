"""
Test suite for binet-exact

Contains:
- tests/unit/          : Unit tests for individual modules
"""
