"""
kinometa Test Suite.

- unit/: Tests for each normalizer, the pipeline, settings and the CLI
- conftest.py: Shared payload fixtures and test settings

Run tests with: pytest
"""
