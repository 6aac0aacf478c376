"""Green-Lagrange strain from the deformation gradient."""

from typing import Optional

import numpy as np

from .contracts import as_deformation_gradient, check_output
from .voigt import strain_count, tensor_to_voigt_strain


def green_lagrange_tensor(f) -> np.ndarray:
    """
    Compute the Green-Lagrange strain tensor E.

        E = 0.5 * (F^T F - I)

    This strain measure is work-conjugate to the Second Piola-Kirchhoff
    stress and vanishes for any rigid rotation F = R.

    Parameters
    ----------
    f : array_like
        (rank × rank) deformation gradient.

    Returns
    -------
    np.ndarray
        (rank × rank) symmetric strain tensor.
    """
    F = as_deformation_gradient(f)
    C = F.T @ F
    E = 0.5 * (C - np.eye(F.shape[0]))
    # F^T F is symmetric in exact arithmetic only
    return 0.5 * (E + E.T)


def get_green_lagrange_strain(
    f, out: Optional[np.ndarray] = None, engineering: bool = True
) -> np.ndarray:
    """
    Compute the Green-Lagrange strain in Voigt notation.

    Parameters
    ----------
    f : array_like
        (rank × rank) deformation gradient.
    out : np.ndarray, optional
        Preallocated vector of length ``strain_count(rank)``.
    engineering : bool, optional
        Store shear components as γ = 2E (default), matching the shear rows
        of the Total Lagrangian B-matrices.

    Returns
    -------
    np.ndarray
        rank 1: [E_xx]
        rank 2: [E_xx, E_yy, 0, 2*E_xy]
        rank 3: [E_xx, E_yy, E_zz, 2*E_xy, 2*E_yz, 2*E_zx]
    """
    F = as_deformation_gradient(f)
    eps = check_output(out, (strain_count(F.shape[0]),), "strain")
    return tensor_to_voigt_strain(green_lagrange_tensor(F), engineering=engineering, out=eps)
