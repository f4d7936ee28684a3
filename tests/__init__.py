"""
Test suite for sptk-numerics

Contains:
- tests/unit/          : Unit tests for individual modules
"""
