from .core import KinematicsConfig, ShearConvention
from .kinematics import (
    KinematicsContractError,
    KinematicState,
    SpatialRank,
    TotalLagrangianKinematics,
    displacement_gradient,
    eval_deformation_gradient,
    evaluate_kinematics,
    get_1d_shape_grads_tl,
    get_2d_shape_grads_tl,
    get_3d_shape_grads_tl,
    get_green_lagrange_strain,
    get_shape_grads_tl_func,
    green_lagrange_tensor,
    strain_count,
    tensor_to_voigt_strain,
    voigt_to_tensor_strain,
)

__all__ = [
    "KinematicsConfig",
    "ShearConvention",
    "KinematicsContractError",
    "KinematicState",
    "SpatialRank",
    "TotalLagrangianKinematics",
    "displacement_gradient",
    "eval_deformation_gradient",
    "evaluate_kinematics",
    "get_1d_shape_grads_tl",
    "get_2d_shape_grads_tl",
    "get_3d_shape_grads_tl",
    "get_green_lagrange_strain",
    "get_shape_grads_tl_func",
    "green_lagrange_tensor",
    "strain_count",
    "tensor_to_voigt_strain",
    "voigt_to_tensor_strain",
]
