"""
Unit Tests for Othello Engine

This package contains unit tests for all engine components.

Running Tests:
    # Run all tests
    pytest tests/

    # Run specific test file
    pytest tests/test_board.py

    # Run with coverage
    pytest tests/ --cov=othello_engine --cov-report=html

    # Run specific test
    pytest tests/test_search.py::TestFindBestMove::test_opening_depth_one

Dependencies:
    - pytest: Test framework
    - pytest-cov: Coverage reporting
"""
