"""Test container helpers."""

from .container import build_test_container

__all__ = [
    "build_test_container",
]
