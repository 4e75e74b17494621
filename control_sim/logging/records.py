"""
Log record emitted by the simulation harness.
"""

from dataclasses import dataclass, asdict, fields
from typing import Dict, List


@dataclass(frozen=True)
class LogRecord:
    """Flat snapshot of one logged control step (SI units)."""
    time: float
    position: float
    velocity: float
    voltage: float
    setpoint: float

    @classmethod
    def columns(cls) -> List[str]:
        """CSV column order."""
        return [f.name for f in fields(cls)]

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)
