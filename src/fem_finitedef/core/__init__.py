"""
Core module for fem-finitedef.

Provides configuration of the kinematics routines.
"""

from .config import KinematicsConfig, ShearConvention

__all__ = [
    "KinematicsConfig",
    "ShearConvention",
]
