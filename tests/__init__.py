# sha2engine Test Suite
"""
Comprehensive test suite including:
- Unit tests for the core engine
- Known-answer, chunking and Monte Carlo tests per variant
- Contract tests (one-shot finalize, length-field wraparound)

Run with: pytest
Coverage: coverage run -m pytest && coverage report
"""
