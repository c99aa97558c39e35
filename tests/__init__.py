"""
Test suite for betterfractions

Contains:
- tests/unit/          : Unit tests for individual modules
"""
