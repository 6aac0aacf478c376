"""Shared helpers for building kinematic test states."""

import numpy as np


def displacements_for(F_target: np.ndarray, X: np.ndarray) -> np.ndarray:
    """Nodal displacements u_n = (F - I) X_n, node-major, for a linear element."""
    rank = F_target.shape[0]
    return ((F_target - np.eye(rank)) @ X.T).T.ravel()


def rotation_2d(theta: float) -> np.ndarray:
    c, s = np.cos(theta), np.sin(theta)
    return np.array([[c, -s], [s, c]])


def rotation_3d(axis, theta: float) -> np.ndarray:
    """Rodrigues rotation about a (not necessarily unit) axis."""
    k = np.asarray(axis, dtype=float)
    k = k / np.linalg.norm(k)
    K = np.array(
        [
            [0.0, -k[2], k[1]],
            [k[2], 0.0, -k[0]],
            [-k[1], k[0], 0.0],
        ]
    )
    return np.eye(3) + np.sin(theta) * K + (1.0 - np.cos(theta)) * (K @ K)
