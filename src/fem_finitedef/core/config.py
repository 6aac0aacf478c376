"""
Kinematics Configuration Module.

YAML-based configuration for the Total Lagrangian kinematics routines.

Example YAML configuration:
    kinematics:
      rank: 3
      shear_convention: "engineering"
"""

import logging
from dataclasses import asdict, dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

logger = logging.getLogger(__name__)


class ShearConvention(str, Enum):
    """Storage of shear components in Voigt strain vectors."""

    ENGINEERING = "engineering"  # γ = 2E
    TENSORIAL = "tensorial"  # E


@dataclass
class KinematicsConfig:
    """Configuration of the Total Lagrangian kinematics.

    Parameters
    ----------
    rank : int, optional
        Spatial dimensionality (1, 2 or 3). If None, the rank is taken from
        the shape function gradient matrix at evaluation time.
    shear_convention : str
        "engineering" (default) or "tensorial".
    """

    rank: Optional[int] = None
    shear_convention: str = ShearConvention.ENGINEERING.value

    def __post_init__(self):
        if isinstance(self.shear_convention, ShearConvention):
            self.shear_convention = self.shear_convention.value
        valid = [c.value for c in ShearConvention]
        if self.shear_convention not in valid:
            raise ValueError(
                f"Invalid shear convention: {self.shear_convention}. Valid: {valid}"
            )
        if self.rank is not None:
            if isinstance(self.rank, bool) or self.rank not in (1, 2, 3):
                raise ValueError(f"rank must be 1, 2 or 3: {self.rank}")
            self.rank = int(self.rank)

        if self.shear_convention == ShearConvention.TENSORIAL.value:
            logger.info(
                "Tensorial shear convention selected. Voigt shear strains and B-matrix "
                "shear rows are halved; constitutive matrices must use the same convention."
            )

    @property
    def engineering(self) -> bool:
        return self.shear_convention == ShearConvention.ENGINEERING.value

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "KinematicsConfig":
        """Create a configuration from a dictionary.

        Parameters
        ----------
        data : dict or None
            Either the bare kinematics mapping or a mapping with a
            ``kinematics`` section. None gives the defaults.
        """
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError(f"Kinematics configuration must be a mapping, got {type(data)}")
        if "kinematics" in data:
            return cls.from_dict(data["kinematics"])

        unknown = set(data) - {"rank", "shear_convention"}
        if unknown:
            raise ValueError(f"Unknown kinematics configuration keys: {sorted(unknown)}")
        return cls(
            rank=data.get("rank", None),
            shear_convention=data.get("shear_convention", ShearConvention.ENGINEERING.value),
        )

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path]) -> "KinematicsConfig":
        """Load configuration from a YAML file.

        Parameters
        ----------
        yaml_path : str or Path
            Path to the YAML configuration file.

        Returns
        -------
        KinematicsConfig
            Validated configuration object.
        """
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {yaml_path}")

        with open(yaml_path, "r") as f:
            data = yaml.safe_load(f)

        config = cls.from_dict(data)
        logger.debug("Loaded kinematics configuration from %s: %s", yaml_path, config)
        return config

    def to_dict(self) -> Dict[str, Any]:
        return {"kinematics": asdict(self)}
