"""Voigt layout of strain vectors.

Strain vector ordering per spatial rank:

    rank 1:  ε = [εxx]
    rank 2:  ε = [εxx, εyy, εzz, γxy]              (εzz ≡ 0 for plane problems)
    rank 3:  ε = [εxx, εyy, εzz, γxy, γyz, γzx]

Shear slots hold engineering strains (γ = 2E) unless the tensorial
convention is requested explicitly.
"""

from types import MappingProxyType
from typing import Optional, Tuple

import numpy as np

from .contracts import KinematicsContractError, check_output, check_rank

STRAIN_COUNTS = MappingProxyType({1: 1, 2: 4, 3: 6})

# Tensor index pair stored in each Voigt slot; None marks the plane zz placeholder.
_VOIGT_COMPONENTS = {
    1: ((0, 0),),
    2: ((0, 0), (1, 1), None, (0, 1)),
    3: ((0, 0), (1, 1), (2, 2), (0, 1), (1, 2), (2, 0)),
}


def strain_count(rank: int) -> int:
    """Number of strain components stored for the given spatial rank."""
    if rank == 1:
        return 1
    elif rank == 2:
        return 4
    elif rank == 3:
        return 6
    raise KinematicsContractError(f"No strain layout for rank {rank!r}")


def voigt_components(rank: int) -> Tuple[Optional[Tuple[int, int]], ...]:
    return _VOIGT_COMPONENTS[check_rank(rank)]


def tensor_to_voigt_strain(
    tensor, engineering: bool = True, out: Optional[np.ndarray] = None
) -> np.ndarray:
    """
    Pack a symmetric strain tensor into a Voigt vector.

    Parameters
    ----------
    tensor : array_like
        Symmetric strain tensor (rank × rank).
    engineering : bool, optional
        Store shear slots as γ = 2E (default) or as the tensor component E.
    out : np.ndarray, optional
        Preallocated vector of length ``strain_count(rank)``.

    Returns
    -------
    np.ndarray
        Strain vector in Voigt ordering.
    """
    tensor = np.asarray(tensor, dtype=float)
    if tensor.ndim != 2 or tensor.shape[0] != tensor.shape[1]:
        raise KinematicsContractError(f"Strain tensor must be square, got shape {tensor.shape}")
    rank = check_rank(tensor.shape[0])
    eps = check_output(out, (strain_count(rank),), "strain")

    shear_factor = 2.0 if engineering else 1.0
    for slot, pair in enumerate(_VOIGT_COMPONENTS[rank]):
        if pair is None:
            eps[slot] = 0.0
            continue
        a, b = pair
        eps[slot] = tensor[a, b] if a == b else shear_factor * tensor[a, b]
    return eps


def voigt_to_tensor_strain(eps, rank: int, engineering: bool = True) -> np.ndarray:
    """
    Unpack a Voigt strain vector into a symmetric tensor.

    The plane zz slot of a rank-2 vector is not part of the 2×2 tensor and is
    ignored.
    """
    rank = check_rank(rank)
    eps = np.asarray(eps, dtype=float)
    if eps.shape != (strain_count(rank),):
        raise KinematicsContractError(
            f"Strain vector for rank {rank} must have shape ({strain_count(rank)},), "
            f"got {eps.shape}"
        )

    shear_factor = 0.5 if engineering else 1.0
    tensor = np.zeros((rank, rank))
    for slot, pair in enumerate(_VOIGT_COMPONENTS[rank]):
        if pair is None:
            continue
        a, b = pair
        if a == b:
            tensor[a, a] = eps[slot]
        else:
            tensor[a, b] = tensor[b, a] = shear_factor * eps[slot]
    return tensor
