"""
Test suite for delivery fee engine

Contains:
- tests/unit/          : Unit tests for individual modules
"""
