"""
Total Lagrangian kinematics.

Deformation gradient, Green-Lagrange strain and nonlinear strain-displacement
matrices for 1D, 2D and 3D elements.
"""

from .contracts import KinematicsContractError
from .deformation import displacement_gradient, eval_deformation_gradient
from .evaluator import KinematicState, TotalLagrangianKinematics, evaluate_kinematics
from .shape_grads import (
    SpatialRank,
    get_1d_shape_grads_tl,
    get_2d_shape_grads_tl,
    get_3d_shape_grads_tl,
    get_shape_grads_tl_func,
)
from .strain import get_green_lagrange_strain, green_lagrange_tensor
from .voigt import (
    STRAIN_COUNTS,
    strain_count,
    tensor_to_voigt_strain,
    voigt_components,
    voigt_to_tensor_strain,
)

__all__ = [
    "KinematicsContractError",
    "displacement_gradient",
    "eval_deformation_gradient",
    "KinematicState",
    "TotalLagrangianKinematics",
    "evaluate_kinematics",
    "SpatialRank",
    "get_1d_shape_grads_tl",
    "get_2d_shape_grads_tl",
    "get_3d_shape_grads_tl",
    "get_shape_grads_tl_func",
    "get_green_lagrange_strain",
    "green_lagrange_tensor",
    "STRAIN_COUNTS",
    "strain_count",
    "tensor_to_voigt_strain",
    "voigt_components",
    "voigt_to_tensor_strain",
]
