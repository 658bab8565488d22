import logging
from typing import Sequence
from core import config
from core.components import Material, WireType, StandardSize
from core.models import InstallationMethod, ProtectionAdvice, SafeSizeSelection, SizingRequest
from standards.dc_tables import FUSE_RATINGS, INSTALLATION_DERATING, get_base_ampacity, get_temp_derating
from standards.thermal import effective_temperature

log = logging.getLogger(__name__)

# Above this fraction of the insulation rating the conductor is penalized
THERMAL_PENALTY_THRESHOLD = 0.9
THERMAL_PENALTY_FLOOR = 0.5

def thermal_penalty(effective_temp_c: float, wire_type: WireType) -> float:
    """
    1.0 up to 90% of the insulation rating, then falls linearly to 0.5 at
    the rating itself and stays at 0.5 beyond it.
    """
    threshold = wire_type.max_temp_c * THERMAL_PENALTY_THRESHOLD
    if effective_temp_c <= threshold:
        return 1.0
    progress = (effective_temp_c - threshold) / (wire_type.max_temp_c - threshold)
    return max(THERMAL_PENALTY_FLOOR, 1.0 - (1.0 - THERMAL_PENALTY_FLOOR) * progress)

def ampacity(area: float, material: Material, installation: InstallationMethod,
             ambient_c: float, wire_type: WireType) -> float:
    """
    Derated current-carrying capacity (A) of a conductor.

    base(area) x material x temperature(ambient) x installation x thermal
    penalty, applied in that order.
    """
    base = get_base_ampacity(area)
    f_material = material.ampacity_factor
    f_temp = get_temp_derating(ambient_c)
    f_install = INSTALLATION_DERATING[installation]
    f_thermal = thermal_penalty(effective_temperature(ambient_c, installation), wire_type)

    amps = base * f_material * f_temp * f_install * f_thermal
    log.debug("Ampacity %.2f mm2: %.1f A (base %.1f * mat %.2f * temp %.3f * inst %.2f * thermal %.3f)",
              area, amps, base, f_material, f_temp, f_install, f_thermal)
    return amps

def recommend_fuse(ampacity_a: float, safety_factor: float = config.FUSE_SAFETY_FACTOR) -> float:
    """Largest standard fuse <= ampacity * safety_factor, else the smallest fuse."""
    limit = ampacity_a * safety_factor
    selected = None
    for rating in FUSE_RATINGS:
        if rating <= limit:
            selected = rating
    if selected is None:
        return FUSE_RATINGS[0]
    return selected

def find_minimum_safe_size(required_current: float, material: Material, installation: InstallationMethod,
                           ambient_c: float, wire_type: WireType, table: Sequence[StandardSize],
                           safety_margin: float = config.AMPACITY_SAFETY_MARGIN) -> SafeSizeSelection:
    """First size (ascending table) whose derated ampacity covers current * margin."""
    target = required_current * safety_margin
    amps = 0.0
    for size in table:
        amps = ampacity(size.area_mm2, material, installation, ambient_c, wire_type)
        if amps >= target:
            return SafeSizeSelection(size=size, ampacity_a=amps, required_a=target)

    log.info("No standard size carries %.1f A, falling back to %s", target, table[-1].display_name)
    return SafeSizeSelection(size=table[-1], ampacity_a=amps, required_a=target, is_safe=False)

def advise_protection(size: StandardSize, request: SizingRequest,
                      safety_factor: float = config.FUSE_SAFETY_FACTOR) -> ProtectionAdvice:
    amps = ampacity(size.area_mm2, request.material, request.installation,
                    request.ambient_temp_c, request.wire_type)
    fuse = recommend_fuse(amps, safety_factor)
    return ProtectionAdvice(ampacity_a=amps, fuse_a=fuse,
                            fuse_within_limit=fuse <= amps * safety_factor)
