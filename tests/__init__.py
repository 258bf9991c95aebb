"""
Test suite for the leap calendar core

Contains:
- tests/unit/          : Unit tests for individual modules
- tests/support/       : Host calendar collaborator for cross-checks
"""
