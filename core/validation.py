"""Caller-side validation shared by the CLI and the web form.

Raw values (strings from a prompt, numbers from a widget) are checked here
and bundled into a :class:`SizingRequest`. The engine assumes every request
it receives passed through :func:`build_request`.
"""

import math
from typing import Optional, Union
from core import config
from core.errors import InvalidInputError
from core.models import SizingRequest, TemperatureUnit
from standards.dc_tables import get_material, get_wire_type, get_installation

Number = Union[str, float, int]


def parse_number(val: Number, field: str) -> float:
    """Accepts numbers or numeric strings ('12', '2,5'); raises InvalidInputError otherwise."""
    if isinstance(val, bool):
        raise InvalidInputError(field, f"{field}: expected a number")
    if isinstance(val, (int, float)):
        num = float(val)
    else:
        text = str(val).strip().replace(",", ".")
        if not text:
            raise InvalidInputError(field, f"{field} is required")
        try:
            num = float(text)
        except ValueError:
            raise InvalidInputError(field, f"{field}: '{val}' is not a number") from None
    if not math.isfinite(num):
        raise InvalidInputError(field, f"{field} must be a finite number")
    return num


def parse_temp_unit(unit: Union[str, TemperatureUnit]) -> TemperatureUnit:
    if isinstance(unit, TemperatureUnit):
        return unit
    try:
        return TemperatureUnit(str(unit).strip().upper() or "C")
    except ValueError:
        raise InvalidInputError("temp_unit", f"Temperature unit must be C or F, got '{unit}'") from None


def parse_voltage(val: Number, max_voltage: Optional[float] = None) -> float:
    max_voltage = config.MAX_VOLTAGE if max_voltage is None else max_voltage
    v = parse_number(val, "voltage")
    if v <= 0 or v > max_voltage:
        raise InvalidInputError("voltage", f"Voltage must be between 0 and {max_voltage:g} V (inclusive)")
    return v


def parse_positive(val: Number, field: str, label: str) -> float:
    num = parse_number(val, field)
    if num <= 0:
        raise InvalidInputError(field, f"{label} must be a positive value")
    return num


def parse_drop_percent(val: Number) -> float:
    drop = parse_number(val, "max_drop_percent")
    if drop <= 0 or drop > config.MAX_VOLTAGE_DROP_PERCENT:
        raise InvalidInputError(
            "max_drop_percent",
            f"Voltage drop must be between 0 and {config.MAX_VOLTAGE_DROP_PERCENT:g}%",
        )
    return drop

def build_request(voltage: Number, current: Number, length: Number,
                  max_drop_percent: Optional[Number] = None,
                  round_trip: bool = False,
                  material: str = "copper",
                  ambient_temp: Optional[Number] = None,
                  temp_unit: Union[str, TemperatureUnit] = "C",
                  installation: str = "air",
                  wire_type: str = "generic",
                  max_voltage: Optional[float] = None) -> SizingRequest:
    v = parse_voltage(voltage, max_voltage)
    i = parse_positive(current, "current", "Current")
    length_m = parse_positive(length, "length", "Length")

    if max_drop_percent is None or (isinstance(max_drop_percent, str) and not max_drop_percent.strip()):
        drop = config.DEFAULT_VOLTAGE_DROP_PERCENT
    else:
        drop = parse_drop_percent(max_drop_percent)

    if ambient_temp is None or (isinstance(ambient_temp, str) and not ambient_temp.strip()):
        temp = config.DEFAULT_AMBIENT_TEMP
    else:
        temp = parse_number(ambient_temp, "ambient_temp")

    return SizingRequest(
        voltage=v,
        current=i,
        length_m=length_m,
        material=get_material(material),
        wire_type=get_wire_type(wire_type),
        installation=get_installation(installation),
        max_drop_percent=drop,
        round_trip=bool(round_trip),
        ambient_temp=temp,
        temp_unit=parse_temp_unit(temp_unit),
    )
