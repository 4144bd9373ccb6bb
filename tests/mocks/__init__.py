"""
Centralized mock objects for testing.

This package provides reusable mock factories for common testing scenarios,
reducing code duplication across test files.
"""
