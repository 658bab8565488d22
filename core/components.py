from dataclasses import dataclass
from typing import Optional

@dataclass(frozen=True)
class Material:
    key: str
    name: str
    resistivity_ref: float        # Ohm.mm2/m at the reference temperature
    temp_coefficient: float       # per degC
    weight_per_mm2_per_m: float   # g/m per mm2
    ampacity_factor: float = 1.0  # Relative to copper

    def __post_init__(self):
        if self.resistivity_ref <= 0 or self.temp_coefficient <= 0:
            raise ValueError(f"Material '{self.key}' needs positive resistivity and temperature coefficient")

@dataclass(frozen=True)
class WireType:
    key: str
    name: str
    max_temp_c: float
    description: str = ""

    def __post_init__(self):
        if self.max_temp_c <= 0:
            raise ValueError(f"Wire type '{self.key}' needs a positive temperature rating")

@dataclass(frozen=True)
class StandardSize:
    area_mm2: float
    label: Optional[str] = None  # AWG gauge, None for metric sizes

    @property
    def is_awg(self) -> bool:
        return self.label is not None

    @property
    def display_name(self) -> str:
        if self.is_awg:
            return f"AWG {self.label} ({self.area_mm2:.2f} mm²)"
        return f"{self.area_mm2:.2f} mm²"
