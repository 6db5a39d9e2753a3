"""
Test suite for scriptform

Contains:
- tests/unit/          : Unit tests for individual modules
"""
