"""
jss-kit Test Suite.

- unit/: DataProcessor, markup extraction, lookup, service and transport tests
- conftest.py: Shared fixtures and test configuration

Run tests with: pytest
"""
