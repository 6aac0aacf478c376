"""Precondition checks shared by the kinematics routines.

Every violation is a programming error in the calling element code, so the
checks raise immediately and nothing is written to the output buffers.
"""

from typing import Optional, Tuple

import numpy as np

VALID_RANKS: Tuple[int, ...] = (1, 2, 3)


class KinematicsContractError(ValueError):
    """Raised when array shapes or the spatial rank break a routine's contract."""


def check_rank(rank: int) -> int:
    if isinstance(rank, bool) or rank not in VALID_RANKS:
        raise KinematicsContractError(f"Spatial rank must be one of {VALID_RANKS}, got {rank!r}")
    return int(rank)


def as_gradient_matrix(g, rank: Optional[int] = None) -> np.ndarray:
    """Return the shape-function gradient matrix as a float array.

    Parameters
    ----------
    g : array_like
        Gradient matrix (rank × n_nodes).
    rank : int, optional
        Expected number of rows. When omitted, the row count defines the rank.
    """
    g = np.asarray(g, dtype=float)
    if g.ndim != 2:
        raise KinematicsContractError(f"Gradient matrix must be 2-D, got shape {g.shape}")
    check_rank(g.shape[0])
    if rank is not None and g.shape[0] != rank:
        raise KinematicsContractError(
            f"Gradient matrix must have {rank} rows, got shape {g.shape}"
        )
    if g.shape[1] < 1:
        raise KinematicsContractError("Gradient matrix must have at least one node column")
    return g


def as_deformation_gradient(f, rank: Optional[int] = None) -> np.ndarray:
    f = np.asarray(f, dtype=float)
    if f.ndim != 2 or f.shape[0] != f.shape[1]:
        raise KinematicsContractError(
            f"Deformation gradient must be a square matrix, got shape {f.shape}"
        )
    check_rank(f.shape[0])
    if rank is not None and f.shape[0] != rank:
        raise KinematicsContractError(
            f"Deformation gradient must be {rank}×{rank}, got shape {f.shape}"
        )
    return f


def check_output(out: Optional[np.ndarray], shape: Tuple[int, ...], name: str) -> np.ndarray:
    """Validate a caller-supplied output buffer, or allocate a new one."""
    if out is None:
        return np.empty(shape, dtype=float)
    if not isinstance(out, np.ndarray):
        raise KinematicsContractError(f"{name} buffer must be a numpy array, got {type(out)}")
    if out.shape != shape:
        raise KinematicsContractError(f"{name} buffer must have shape {shape}, got {out.shape}")
    if not np.issubdtype(out.dtype, np.floating):
        raise KinematicsContractError(f"{name} buffer must be floating point, got {out.dtype}")
    return out
