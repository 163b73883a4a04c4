"""Shared helpers."""

from .hints import suggest_key

__all__ = ["suggest_key"]
