"""Utility functions and helpers."""

from .async_utils import retry_with_backoff

__all__ = ["retry_with_backoff"]
