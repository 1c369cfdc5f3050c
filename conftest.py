"""
Root conftest of the repository.

Its presence makes pytest put the repository root on ``sys.path``, so tests
can import shared helpers from ``tests.test_utils``.
"""
