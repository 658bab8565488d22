import logging
from typing import Sequence
from core import config
from core.calculator import CableCalculator
from core.components import StandardSize
from core.models import (SizingRequest, SizingResult, SizeSelection, VoltageDrop, TemperatureCheck,
                         ProtectionAdvice, SafeSizeSelection)
from standards import ampacity, sizing, thermal
from standards.dc_tables import METRIC_SIZES, AWG_SIZES
from standards.temperature_check import validate_wire_temperature

log = logging.getLogger(__name__)

class DCCableCalculator(CableCalculator):
    """Low-voltage DC sizing against the metric and AWG catalogs."""

    def __init__(self, fuse_safety_factor: float = config.FUSE_SAFETY_FACTOR,
                 ampacity_safety_margin: float = config.AMPACITY_SAFETY_MARGIN):
        self.fuse_safety_factor = fuse_safety_factor
        self.ampacity_safety_margin = ampacity_safety_margin

    @property
    def metric_sizes(self) -> Sequence[StandardSize]:
        return METRIC_SIZES

    @property
    def awg_sizes(self) -> Sequence[StandardSize]:
        return AWG_SIZES

    def effective_temperature(self, request: SizingRequest) -> float:
        return thermal.effective_temperature(request.ambient_temp_c, request.installation)

    def resistivity(self, request: SizingRequest, effective_temp_c: float) -> float:
        return thermal.resistivity_at(request.material, effective_temp_c)

    def required_area(self, request: SizingRequest) -> float:
        return sizing.required_area(request)

    def diameter(self, area: float) -> float:
        return sizing.area_to_diameter(area)

    def resolve(self, required_area: float, table: Sequence[StandardSize]) -> SizeSelection:
        return sizing.resolve_standard(required_area, table)

    def actual_drop(self, size: StandardSize, request: SizingRequest) -> VoltageDrop:
        return sizing.actual_drop(size, request)

    def advise_protection(self, size: StandardSize, request: SizingRequest) -> ProtectionAdvice:
        return ampacity.advise_protection(size, request, self.fuse_safety_factor)

    def minimum_safe_size(self, request: SizingRequest, table: Sequence[StandardSize]) -> SafeSizeSelection:
        return ampacity.find_minimum_safe_size(
            request.current, request.material, request.installation,
            request.ambient_temp_c, request.wire_type, table, self.ampacity_safety_margin,
        )

    def check_temperature(self, request: SizingRequest, effective_temp_c: float) -> TemperatureCheck:
        return validate_wire_temperature(effective_temp_c, request.wire_type)

    def weight(self, area: float, request: SizingRequest) -> float:
        return sizing.cable_weight(area, request.length_m, request.material, request.round_trip)

    def calculate(self, request: SizingRequest) -> SizingResult:
        log.info("Sizing %.1f V / %.2f A over %.2f m (%s, %s, %s)",
                 request.voltage, request.current, request.length_m, request.material.name,
                 request.installation.value, request.wire_type.name)
        result = super().calculate(request)
        log.debug("Sizing finished with %d warning(s)", len(result.warnings))
        return result


def calculate_sizing(request: SizingRequest) -> SizingResult:
    return DCCableCalculator().calculate(request)
