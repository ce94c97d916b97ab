"""Unit test shared fixtures.

Fixtures here are available to all unit tests but not integration tests.
"""
