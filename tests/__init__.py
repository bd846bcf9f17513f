"""
Test suite for Best Path

Contains:
- tests/unit/          : Unit tests for individual modules
"""
