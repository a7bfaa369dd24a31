"""
Test suite for stats-formulas

Contains:
- tests/unit/          : Unit tests for individual modules
"""
