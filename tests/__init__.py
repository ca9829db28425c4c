"""Test suite for valobs.

- unit/: Unit tests for value objects, pydantic field types, configuration,
  Result-typed parsing and the logging adapter.
"""
