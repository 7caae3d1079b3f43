"""
Test suite for roman-arithmetic

Contains:
- tests/unit/          : Unit tests for individual modules
"""
