"""Run observability helpers.

This package emits deterministic stage events for concordance runs.
"""

from .logger import RunLogger

__all__ = ["RunLogger"]
