"""Functional primitives for slicekit.

This package provides the sequence helpers of the library, grouped by
operation family. Every helper is stateless and returns a new container,
except :func:`slicekit.functional.shuffling.shuffle`, which permutes its
argument in place.
"""
