"""
Test Suite
==========

Test suite matching the positronic/ package structure.

Test Categories:
- unit: Unit tests for individual components
- integration: API endpoint and static asset testing
"""
