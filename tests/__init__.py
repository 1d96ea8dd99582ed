"""
Test suite for digit-curry

Contains:
- tests/unit/          : Unit tests for individual modules
"""
