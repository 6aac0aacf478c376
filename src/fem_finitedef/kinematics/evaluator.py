"""Kinematic state at an integration point.

Bundles the deformation gradient, the Green-Lagrange strain and the
Total Lagrangian B-matrix computed from one set of nodal displacements, so
that element routines can evaluate all three in a single call.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from fem_finitedef.core.config import KinematicsConfig

from .contracts import KinematicsContractError, as_gradient_matrix
from .deformation import eval_deformation_gradient
from .shape_grads import SpatialRank, get_shape_grads_tl_func
from .strain import get_green_lagrange_strain
from .voigt import voigt_components

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KinematicState:
    """Kinematic quantities at one point of the reference configuration.

    Attributes
    ----------
    rank : int
        Spatial dimensionality.
    F : np.ndarray
        (rank × rank) deformation gradient.
    strain : np.ndarray
        Green-Lagrange strain in Voigt notation.
    B0 : np.ndarray
        (n_strains × rank·n_nodes) strain-displacement matrix, δε = B0 · δu.
    """

    rank: int
    F: np.ndarray
    strain: np.ndarray
    B0: np.ndarray


def _shear_rows(rank: int):
    return [slot for slot, pair in enumerate(voigt_components(rank)) if pair and pair[0] != pair[1]]


def evaluate_kinematics(u, g, config: Optional[KinematicsConfig] = None) -> KinematicState:
    """
    Evaluate F, the Voigt Green-Lagrange strain and B0 at a point.

    Parameters
    ----------
    u : array_like
        Nodal displacements (rank · n_nodes), node-major ordering.
    g : array_like
        (rank × n_nodes) shape function gradients in reference coordinates.
    config : KinematicsConfig, optional
        Shear convention and expected rank. Defaults to engineering shear
        with the rank taken from ``g``.

    Returns
    -------
    KinematicState
        With the tensorial convention the B0 shear rows are halved along with
        the shear strains, so B0 remains the derivative of the strain vector.
    """
    config = config or KinematicsConfig()
    g = as_gradient_matrix(g, config.rank)
    rank = g.shape[0]

    F = eval_deformation_gradient(u, g)
    strain = get_green_lagrange_strain(F, engineering=config.engineering)
    B0 = get_shape_grads_tl_func(rank)(g, F)
    if not config.engineering:
        B0[_shear_rows(rank), :] *= 0.5

    return KinematicState(rank=rank, F=F, strain=strain, B0=B0)


class TotalLagrangianKinematics:
    """Kinematics evaluator bound to a fixed spatial rank.

    Example
    -------
        kin = TotalLagrangianKinematics(KinematicsConfig(rank=2))
        state = kin.evaluate(u_elem, dN_dX)
    """

    def __init__(self, config: KinematicsConfig):
        if config.rank is None:
            raise KinematicsContractError("TotalLagrangianKinematics requires config.rank")
        self.config = config
        self.rank = SpatialRank(config.rank)
        self._shape_grads_tl = get_shape_grads_tl_func(self.rank)
        self._shear_rows = _shear_rows(self.rank)
        logger.debug(
            "TotalLagrangianKinematics: rank=%d, shear_convention=%s",
            self.rank,
            config.shear_convention,
        )

    @property
    def strain_count(self) -> int:
        return self.rank.strain_count

    def deformation_gradient(self, u, g) -> np.ndarray:
        return eval_deformation_gradient(u, as_gradient_matrix(g, self.rank))

    def strain(self, u, g) -> np.ndarray:
        F = self.deformation_gradient(u, g)
        return get_green_lagrange_strain(F, engineering=self.config.engineering)

    def evaluate(self, u, g) -> KinematicState:
        g = as_gradient_matrix(g, self.rank)
        F = eval_deformation_gradient(u, g)
        strain = get_green_lagrange_strain(F, engineering=self.config.engineering)
        B0 = self._shape_grads_tl(g, F)
        if not self.config.engineering:
            B0[self._shear_rows, :] *= 0.5
        return KinematicState(rank=int(self.rank), F=F, strain=strain, B0=B0)

    def __repr__(self):
        return (
            f"<TotalLagrangianKinematics rank={int(self.rank)} "
            f"shear_convention={self.config.shear_convention}>"
        )
