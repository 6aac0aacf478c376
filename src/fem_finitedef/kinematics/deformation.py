"""Deformation gradient in the reference configuration.

    F = I + H,    H_ij = Σ_n ∂N_n/∂X_j · u_i^n

The nodal displacement vector is stored node by node:
    u = (u_x^0, u_y^0, [u_z^0], u_x^1, u_y^1, ...)
"""

from typing import Optional

import numpy as np

from .contracts import KinematicsContractError, as_gradient_matrix, check_output


def _nodal_displacements(u, g: np.ndarray) -> np.ndarray:
    """Reshape the displacement vector to (n_nodes × rank)."""
    rank, node_count = g.shape
    u = np.asarray(u, dtype=float)
    if u.ndim != 1 or u.shape[0] != rank * node_count:
        raise KinematicsContractError(
            f"Displacement vector must have length {rank * node_count} "
            f"({node_count} nodes × {rank} directions), got shape {u.shape}"
        )
    return u.reshape(node_count, rank)


def displacement_gradient(u, g, out: Optional[np.ndarray] = None) -> np.ndarray:
    """
    Compute the displacement gradient H = ∂u/∂X.

    Parameters
    ----------
    u : array_like
        Nodal displacements (rank · n_nodes), node-major ordering.
    g : array_like
        Shape function gradients in reference coordinates (rank × n_nodes),
        g[j, n] = ∂N_n/∂X_j.
    out : np.ndarray, optional
        Preallocated (rank × rank) result buffer.

    Returns
    -------
    np.ndarray
        (rank × rank) displacement gradient, H[i, j] = ∂u_i/∂X_j.
    """
    g = as_gradient_matrix(g)
    u_nodes = _nodal_displacements(u, g)
    rank = g.shape[0]
    H = check_output(out, (rank, rank), "displacement gradient")

    # (g @ u_nodes)[j, i] = Σ_n g[j, n] u_nodes[n, i]
    H[...] = (g @ u_nodes).T
    return H


def eval_deformation_gradient(u, g, out: Optional[np.ndarray] = None) -> np.ndarray:
    """
    Compute the deformation gradient F = I + ∂u/∂X.

    Parameters
    ----------
    u : array_like
        Nodal displacements (rank · n_nodes), node-major ordering.
    g : array_like
        Shape function gradients in reference coordinates (rank × n_nodes).
    out : np.ndarray, optional
        Preallocated (rank × rank) buffer, fully overwritten.

    Returns
    -------
    np.ndarray
        (rank × rank) deformation gradient. Exactly the identity when all
        displacements are zero.
    """
    F = displacement_gradient(u, g, out=out)
    F[np.diag_indices(F.shape[0])] += 1.0
    return F
