"""Shared helpers for model dataclasses."""

from __future__ import annotations

import numpy as np


def _frozen_array(values, *, dtype: type, label: str) -> np.ndarray:
    """Copy *values* into a new read-only array of *dtype*.

    Raises:
        ValueError: If *values* cannot be converted to *dtype*.
    """
    try:
        arr = np.array(values, dtype=dtype)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{label} must be numeric, got {values!r}") from exc
    arr.setflags(write=False)
    return arr


def _face_array(values, arity: int, label: str) -> np.ndarray:
    """Return *values* as a read-only ``(n_faces, arity)`` int array.

    Accepts either a flat sequence of indices (faces concatenated) or
    an already two-dimensional sequence of faces.  Float input is
    accepted only when every value is a whole number.

    Raises:
        ValueError: If *values* is ragged, holds non-integral indices,
            or does not have the expected shape.
    """
    try:
        raw = np.array(values)
    except ValueError as exc:
        raise ValueError(f"{label} must be a rectangular array of indices") from exc
    if raw.size and not np.issubdtype(raw.dtype, np.integer):
        if (
            not np.issubdtype(raw.dtype, np.floating)
            or not np.all(np.isfinite(raw))
            or np.any(raw != np.round(raw))
        ):
            raise ValueError(
                f"{label} must contain integer vertex indices, got {values!r}"
            )
    arr = raw.astype(int)
    if arr.size == 0:
        arr = np.empty((0, arity), dtype=int)
    elif arr.ndim == 1:
        if len(arr) % arity != 0:
            raise ValueError(
                f"{label} has {len(arr)} indices, which is not a "
                f"multiple of the face arity {arity}"
            )
        arr = arr.reshape(-1, arity)
    elif arr.ndim != 2 or arr.shape[1] != arity:
        raise ValueError(
            f"{label} must have shape (n_faces, {arity}), got {arr.shape}"
        )
    arr.setflags(write=False)
    return arr
