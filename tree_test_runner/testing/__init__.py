"""Helpers for testing code built on tree_test_runner."""
