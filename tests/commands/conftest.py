"""Fixtures shared by command tests.

The task_repo, task_service and seeded_service fixtures live in tests/conftest.py
so top-level tests can use them too.
"""
