"""Decorators for Either-returning functions."""

from fluent_either.decorators.safe import safe

__all__ = ['safe']
