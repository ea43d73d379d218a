"""
Test suite for the arbitrary-precision expression core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
