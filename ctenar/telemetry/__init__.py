"""Telemetry and observability helpers.

This package emits deterministic reader events for auditing CLI runs.
"""

from .logger import ReaderLogger

__all__ = ["ReaderLogger"]
