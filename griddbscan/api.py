"""Array-oriented entry point for DBSCAN clustering."""

from __future__ import annotations

import warnings
from typing import Any

import numpy as np

from griddbscan.algo import MAX_DIMS, MIN_DIMS, dbscan

DBSCAN_MIN_DIMS = MIN_DIMS
DBSCAN_MAX_DIMS = MAX_DIMS

# Beyond this many samples the index arithmetic of fixed-width
# implementations may overflow; callers are warned.
_LARGE_N = 100_000_000


def DBSCAN(X: Any, eps: float = 0.5, min_samples: int = 5) -> tuple[np.ndarray, np.ndarray]:
    """Run DBSCAN on an (n, dim) array of samples.

    Points that do not fit in any cluster are labelled as noise (-1).

    Returns a tuple ``(labels, core_samples)``: an int array of length n
    holding the cluster labels and a bool array of length n telling whether
    each sample is a core sample of its cluster.
    """
    data = np.asarray(X, dtype=np.float64)
    if data.ndim != 2:
        raise ValueError(
            f"DBSCAN: expected a 2-D array of samples, got {data.ndim} dimension(s)"
        )
    n, dim = data.shape

    if dim < DBSCAN_MIN_DIMS:
        raise ValueError(
            f"DBSCAN: invalid input data dimensionality (has to >={DBSCAN_MIN_DIMS})"
        )
    if dim > DBSCAN_MAX_DIMS:
        raise ValueError(f"DBSCAN: dimension >{DBSCAN_MAX_DIMS} is not supported")
    if n > _LARGE_N:
        warnings.warn(
            "DBSCAN: large n, the program behavior might be undefined due to overflow",
            RuntimeWarning,
            stacklevel=2,
        )

    result = dbscan(data.tolist(), float(eps), int(min_samples))
    labels = np.array(result.labels, dtype=np.intc)
    core_samples = np.array(result.core, dtype=np.bool_)
    return labels, core_samples