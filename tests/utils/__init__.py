"""
Test Utilities
==============

Shared mocks and sample data for the test suite.
"""
