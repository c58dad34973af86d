"""Test suite for Release Tagger.

This package contains test modules and fixtures for verifying the functionality
of the Release Tagger tool. It includes tests for:
- Prefix template expansion
- Tag filtering and version selection
- The tag persister
- Version control backends
- Configuration handling

The test suite uses pytest and provides fixtures for common test scenarios.
"""
