"""dailydo Test Suite

Test organization:
- unit/: Unit tests for individual modules
  - parser/: date/time phrase recognition and task text extraction
  - achievements/: catalog, statistics update rule, ledger
  - tasks/: task store and reminder sweep
  - test_clock.py, test_config.py: shared utilities
- integration/: End-to-end flows through the store and the ledger

Running tests:
    # All tests
    pytest

    # Specific module
    pytest tests/unit/achievements/
"""
