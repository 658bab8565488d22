from core.components import WireType
from core.models import TemperatureCheck, TemperatureStatus

# Ratings within 10% of the maximum are flagged
CAUTION_FRACTION = 0.9

def validate_wire_temperature(effective_temp_c: float, wire_type: WireType) -> TemperatureCheck:
    """
    Classifies the operating temperature against the insulation rating.

    The verdict never blocks sizing; callers show it next to the result.
    """
    max_temp = wire_type.max_temp_c

    if effective_temp_c > max_temp:
        excess = effective_temp_c - max_temp
        msg = (f"WARNING: Effective operating temperature ({effective_temp_c:.1f}°C) exceeds "
               f"{wire_type.name} maximum rating ({max_temp:.0f}°C) by {excess:.1f}°C! "
               f"Wire insulation may fail.")
        return TemperatureCheck(TemperatureStatus.UNSAFE, effective_temp_c, max_temp, msg)

    if effective_temp_c > max_temp * CAUTION_FRACTION:
        msg = (f"CAUTION: Effective operating temperature ({effective_temp_c:.1f}°C) is close to "
               f"{wire_type.name} maximum rating ({max_temp:.0f}°C). "
               f"Consider using a higher temperature rated wire.")
        return TemperatureCheck(TemperatureStatus.CAUTION, effective_temp_c, max_temp, msg)

    return TemperatureCheck(TemperatureStatus.SAFE, effective_temp_c, max_temp)
