"""
Test suite for the sequence utilities

Contains:
- tests/unit/          : Unit tests for individual modules
"""
