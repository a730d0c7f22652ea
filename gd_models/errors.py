from __future__ import annotations

"""
Exceptions raised by the numeric core when a dataset has the wrong shape.
"""


class EmptyDatasetError(ValueError):
    """Statistics or parameters were requested from a dataset with no samples."""


class DimensionMismatchError(ValueError):
    """A feature vector does not match the width the model or dataset expects."""
