"""Test suite for the taskstore package.

This package contains tests for the JSON document backend, the task model and
the task store operations.
"""
