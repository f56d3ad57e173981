"""
Test suite for Neurochem Sleep Gate

Contains:
- tests/unit/          : Unit tests for individual modules
"""
