"""
mediabrowser Test Suite

Test Categories:
- unit/: Fast, isolated unit tests with mocked data sources
- integration/: Tests against an in-memory database
- fixtures/: Shared test data factories
"""
