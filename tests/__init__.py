"""
Test suite for the Boolean term building block

Contains:
- tests/unit/          : Unit tests for individual modules
"""
