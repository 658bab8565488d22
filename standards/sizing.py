import logging
import math
from typing import Sequence
from core.components import Material, StandardSize
from core.errors import UndefinedVoltageDropError
from core.models import SizingRequest, SizeSelection, VoltageDrop
from standards.thermal import effective_temperature, resistivity_at

log = logging.getLogger(__name__)

def _request_resistivity(request: SizingRequest) -> float:
    t_eff = effective_temperature(request.ambient_temp_c, request.installation)
    return resistivity_at(request.material, t_eff)

def required_area(request: SizingRequest) -> float:
    """
    Minimum cross section (mm2) that keeps the drop at the allowed maximum.

    V_drop = I * rho(T_eff) * L * d / A, solved for A with
    V_drop = V * p / 100 and d = 2 for round trip, 1 for one-way.
    """
    max_drop = request.max_drop_volts
    if max_drop == 0:
        raise UndefinedVoltageDropError(request.voltage, request.max_drop_percent)

    rho = _request_resistivity(request)
    area = (request.current * rho * request.length_m * request.distance_factor) / max_drop
    log.debug("Required area %.4f mm2 (rho=%.6f, d=%.0f, Vdrop=%.3f V)",
              area, rho, request.distance_factor, max_drop)
    return area

def area_to_diameter(area: float) -> float:
    """Diameter (mm) of a circle with the given area (mm2)."""
    if area < 0:
        raise ValueError(f"Area must not be negative, got {area}")
    return 2 * math.sqrt(area / math.pi)

def cable_weight(area: float, length_m: float, material: Material, round_trip: bool = False) -> float:
    """Conductor weight in grams; both conductors counted for round trip."""
    total = area * material.weight_per_mm2_per_m * length_m
    return total * 2 if round_trip else total

def resolve_standard(required: float, table: Sequence[StandardSize]) -> SizeSelection:
    """
    Rounds up to the first size with area >= required.

    Table must be ascending by area. When required exceeds every entry the
    largest size comes back with is_fallback=True and margin holding the
    deficit (required - largest) instead of a safety buffer.
    """
    for size in table:
        if size.area_mm2 >= required:
            return SizeSelection(size=size, required_area_mm2=required,
                                 margin_mm2=size.area_mm2 - required)

    largest = table[-1]
    log.info("Required area %.2f mm2 exceeds largest standard size %s",
             required, largest.display_name)
    return SizeSelection(size=largest, required_area_mm2=required,
                         margin_mm2=required - largest.area_mm2, is_fallback=True)

def actual_drop(size: StandardSize, request: SizingRequest) -> VoltageDrop:
    """Voltage drop with a concrete standard size instead of the exact area."""
    if request.voltage == 0:
        raise UndefinedVoltageDropError(request.voltage)

    rho = _request_resistivity(request)
    volts = (request.current * rho * request.length_m * request.distance_factor) / size.area_mm2
    return VoltageDrop(volts=volts, percent=(volts / request.voltage) * 100)
