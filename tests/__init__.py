"""
Test suite for fluent-web.

Runs against in-memory page doubles (see conftest.py); no browser is launched.
"""
