"""Pytest configuration helpers for test collection.

Put the repository root on sys.path so tests can import `leafwalker_lib`
without installing the package or setting PYTHONPATH.
"""
import sys
from pathlib import Path


def pytest_configure(config):
    # Insert repo root (one level up from tests/) to sys.path
    repo_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(repo_root))
