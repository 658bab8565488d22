from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional
from .components import Material, WireType, StandardSize
from .converters import to_celsius

class InstallationMethod(Enum):
    AIR = "air"
    CONDUIT = "conduit"
    ISOLATED = "isolated"

    @property
    def display_name(self) -> str:
        return {
            InstallationMethod.AIR: "In air",
            InstallationMethod.CONDUIT: "In conduit",
            InstallationMethod.ISOLATED: "Isolated/Insulated",
        }[self]

class TemperatureUnit(Enum):
    CELSIUS = "C"
    FAHRENHEIT = "F"

class TemperatureStatus(Enum):
    SAFE = "safe"
    CAUTION = "caution"
    UNSAFE = "unsafe"

@dataclass(frozen=True)
class SizingRequest:
    voltage: float
    current: float
    length_m: float
    material: Material
    wire_type: WireType
    installation: InstallationMethod = InstallationMethod.AIR
    max_drop_percent: float = 3.0
    round_trip: bool = False
    ambient_temp: float = 20.0
    temp_unit: TemperatureUnit = TemperatureUnit.CELSIUS

    @property
    def ambient_temp_c(self) -> float:
        return to_celsius(self.ambient_temp, self.temp_unit.value)

    @property
    def distance_factor(self) -> float:
        # Supply and return conductor both carry the current
        return 2.0 if self.round_trip else 1.0

    @property
    def max_drop_volts(self) -> float:
        return self.voltage * (self.max_drop_percent / 100.0)

@dataclass(frozen=True)
class SizeSelection:
    size: StandardSize
    required_area_mm2: float
    margin_mm2: float
    is_fallback: bool = False  # True when margin is a deficit against the largest size

    @property
    def fits(self) -> bool:
        return self.size.area_mm2 >= self.required_area_mm2

@dataclass(frozen=True)
class VoltageDrop:
    volts: float
    percent: float

    def exceeds(self, max_percent: float) -> bool:
        return self.percent > max_percent

@dataclass(frozen=True)
class TemperatureCheck:
    status: TemperatureStatus
    effective_temp_c: float
    max_temp_c: float
    message: str = ""

    @property
    def is_valid(self) -> bool:
        return self.status != TemperatureStatus.UNSAFE

@dataclass(frozen=True)
class ProtectionAdvice:
    ampacity_a: float
    fuse_a: float
    fuse_within_limit: bool = True  # False when only the smallest fuse was left

@dataclass(frozen=True)
class SafeSizeSelection:
    size: StandardSize
    ampacity_a: float
    required_a: float
    is_safe: bool = True

@dataclass(frozen=True)
class SizingResult:
    request: SizingRequest
    effective_temp_c: float
    resistivity: float
    required_area_mm2: float
    required_diameter_mm: float
    metric: SizeSelection
    awg: SizeSelection
    metric_drop: VoltageDrop
    awg_drop: VoltageDrop
    temperature: TemperatureCheck
    metric_protection: Optional[ProtectionAdvice] = None
    awg_protection: Optional[ProtectionAdvice] = None
    min_safe_metric: Optional[SafeSizeSelection] = None
    min_safe_awg: Optional[SafeSizeSelection] = None
    required_weight_g: float = 0.0
    metric_weight_g: float = 0.0
    awg_weight_g: float = 0.0
    warnings: List[str] = field(default_factory=list)
