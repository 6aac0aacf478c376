"""Strain-displacement matrices for the Total Lagrangian formulation.

The nonlinear B-matrix maps virtual nodal displacements to virtual
Green-Lagrange strains, δε = B0 · δu, with B0 depending on the current
deformation gradient F:

    normal row (a, a):  B0[row, n·rank + d] = F[d, a] · ∂N_n/∂X_a
    shear row  (a, b):  B0[row, n·rank + d] = F[d, a] · ∂N_n/∂X_b + F[d, b] · ∂N_n/∂X_a

Row ordering follows the Voigt layout of :mod:`fem_finitedef.kinematics.voigt`
and the shear rows produce engineering strains (γ = 2E). With F = I the
matrices reduce to the small-strain B-matrix.
"""

import logging
from enum import IntEnum
from typing import Callable, Optional

import numpy as np

from .contracts import (
    KinematicsContractError,
    as_deformation_gradient,
    as_gradient_matrix,
    check_output,
)
from .voigt import strain_count

logger = logging.getLogger(__name__)

ShapeGradsTLFunc = Callable[..., np.ndarray]


def _prepare(g, f, out: Optional[np.ndarray], rank: int):
    g = as_gradient_matrix(g, rank)
    F = as_deformation_gradient(f, rank)
    B = check_output(out, (strain_count(rank), rank * g.shape[1]), "B-matrix")
    B.fill(0.0)
    return g, F, B


def get_1d_shape_grads_tl(g, f, out: Optional[np.ndarray] = None) -> np.ndarray:
    """
    Compute the Total Lagrangian B-matrix for 1D problems.

    Parameters
    ----------
    g : array_like
        (1 × n_nodes) shape function gradients in reference coordinates.
    f : array_like
        (1 × 1) deformation gradient.
    out : np.ndarray, optional
        Preallocated (1 × n_nodes) buffer.

    Returns
    -------
    np.ndarray
        (1 × n_nodes) strain-displacement matrix, B0 = F · g.
    """
    g, F, B = _prepare(g, f, out, rank=1)
    B[0, :] = F[0, 0] * g[0, :]
    return B


def get_2d_shape_grads_tl(g, f, out: Optional[np.ndarray] = None) -> np.ndarray:
    """
    Compute the Total Lagrangian B-matrix for plane problems.

    Parameters
    ----------
    g : array_like
        (2 × n_nodes) shape function gradients in reference coordinates.
    f : array_like
        (2 × 2) deformation gradient.
    out : np.ndarray, optional
        Preallocated (4 × 2·n_nodes) buffer.

    Returns
    -------
    np.ndarray
        (4 × 2·n_nodes) strain-displacement matrix for the strain vector
        [ε_xx, ε_yy, ε_zz, γ_xy]. The ε_zz row stays zero.
    """
    g, F, B = _prepare(g, f, out, rank=2)
    dN_dx, dN_dy = g[0], g[1]

    # Columns of the u and v DOFs of every node
    u_cols = slice(0, None, 2)
    v_cols = slice(1, None, 2)

    # ε_xx
    B[0, u_cols] = F[0, 0] * dN_dx
    B[0, v_cols] = F[1, 0] * dN_dx

    # ε_yy
    B[1, u_cols] = F[0, 1] * dN_dy
    B[1, v_cols] = F[1, 1] * dN_dy

    # γ_xy
    B[3, u_cols] = F[0, 0] * dN_dy + F[0, 1] * dN_dx
    B[3, v_cols] = F[1, 0] * dN_dy + F[1, 1] * dN_dx

    return B


def get_3d_shape_grads_tl(g, f, out: Optional[np.ndarray] = None) -> np.ndarray:
    """
    Compute the Total Lagrangian B-matrix for 3D solids.

    Parameters
    ----------
    g : array_like
        (3 × n_nodes) shape function gradients in reference coordinates.
    f : array_like
        (3 × 3) deformation gradient.
    out : np.ndarray, optional
        Preallocated (6 × 3·n_nodes) buffer.

    Returns
    -------
    np.ndarray
        (6 × 3·n_nodes) strain-displacement matrix for the strain vector
        [ε_xx, ε_yy, ε_zz, γ_xy, γ_yz, γ_zx].
    """
    g, F, B = _prepare(g, f, out, rank=3)
    dN_dx, dN_dy, dN_dz = g[0], g[1], g[2]

    for d in range(3):
        cols = slice(d, None, 3)

        # ε_xx, ε_yy, ε_zz
        B[0, cols] = F[d, 0] * dN_dx
        B[1, cols] = F[d, 1] * dN_dy
        B[2, cols] = F[d, 2] * dN_dz

        # γ_xy, γ_yz, γ_zx
        B[3, cols] = F[d, 0] * dN_dy + F[d, 1] * dN_dx
        B[4, cols] = F[d, 1] * dN_dz + F[d, 2] * dN_dy
        B[5, cols] = F[d, 2] * dN_dx + F[d, 0] * dN_dz

    return B


class SpatialRank(IntEnum):
    """Spatial dimensionality of a Total Lagrangian element."""

    ONE_D = 1
    TWO_D = 2
    THREE_D = 3

    @property
    def strain_count(self) -> int:
        return strain_count(int(self))

    @property
    def shape_grads_tl(self) -> ShapeGradsTLFunc:
        return _SHAPE_GRADS_TL[self]


_SHAPE_GRADS_TL = {
    SpatialRank.ONE_D: get_1d_shape_grads_tl,
    SpatialRank.TWO_D: get_2d_shape_grads_tl,
    SpatialRank.THREE_D: get_3d_shape_grads_tl,
}


def get_shape_grads_tl_func(rank: int) -> ShapeGradsTLFunc:
    """
    Select the Total Lagrangian B-matrix builder for a spatial rank.

    Parameters
    ----------
    rank : int
        Number of spatial dimensions (1, 2 or 3).

    Returns
    -------
    callable
        ``builder(g, f, out=None) -> B0`` for that rank.

    Raises
    ------
    KinematicsContractError
        If ``rank`` is not 1, 2 or 3.
    """
    if isinstance(rank, bool):
        raise KinematicsContractError(f"Invalid spatial rank: {rank!r}")
    try:
        spatial_rank = SpatialRank(rank)
    except ValueError:
        raise KinematicsContractError(f"Invalid spatial rank: {rank!r}") from None
    logger.debug("Selected %s for rank %d", spatial_rank.shape_grads_tl.__name__, rank)
    return spatial_rank.shape_grads_tl
