"""
Harness timing configuration.
"""

from dataclasses import dataclass, asdict
from typing import Dict, Any
import json

from control_sim.exceptions import ValidationError
from control_sim.utils.math_utils import integer_ratio
from control_sim.utils.validators import validate_positive


@dataclass(frozen=True)
class HarnessConfig:
    """
    Dual-rate timing of a simulation run.

    The controller runs every ``control_dt``; the plant is integrated with
    ``simul_dt`` sub-steps, which must evenly divide the control period.
    """

    control_dt: float = 1.0 / 200.0
    simul_dt: float = 1.0 / 200.0 / 1000.0
    log_every: int = 20  # Log one record per this many control steps

    def __post_init__(self):
        validate_positive(self.control_dt, "control_dt")
        validate_positive(self.simul_dt, "simul_dt")
        if self.simul_dt > self.control_dt:
            raise ValidationError("simul_dt must not exceed control_dt")
        try:
            integer_ratio(self.control_dt, self.simul_dt)
        except ValueError as e:
            raise ValidationError(f"simul_dt must evenly divide control_dt: {e}") from e
        if not isinstance(self.log_every, int) or self.log_every < 1:
            raise ValidationError(f"log_every must be a positive integer, got {self.log_every!r}")

    @property
    def substeps(self) -> int:
        """Physics sub-steps per control period."""
        return integer_ratio(self.control_dt, self.simul_dt)

    def copy(self, **changes) -> 'HarnessConfig':
        params = self.to_dict()
        params.update(changes)
        return HarnessConfig(**params)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'HarnessConfig':
        return cls(**data)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)

    @classmethod
    def from_json(cls, json_str: str) -> 'HarnessConfig':
        return cls.from_dict(json.loads(json_str))
