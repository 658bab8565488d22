import logging
from types import MappingProxyType
from core.components import Material, WireType, StandardSize
from core.errors import UnknownCatalogKeyError
from core.models import InstallationMethod

log = logging.getLogger(__name__)

# Resistivity values below are published at 20°C and are compensated from there.
REFERENCE_TEMP_C = 20.0

# Conductor materials
# Resistivity (Ohm.mm2/m @ 20°C), alpha (1/°C), weight (g/m per mm2 = density in g/cm3)
# Ampacity factor: aluminum carries ~61% of the current of copper for the same area
MATERIALS = MappingProxyType({
    "copper": Material("copper", "Copper", 0.0175, 0.00393, 8.96, 1.00),
    "aluminum": Material("aluminum", "Aluminum", 0.0283, 0.00403, 2.70, 0.61),
})

# Insulation types and their maximum conductor temperature (°C)
WIRE_TYPES = MappingProxyType({
    "flry": WireType("flry", "FLRY", 105.0, "Automotive thin-wall PVC (FLRY-A/B), stranded copper"),
    "flry-a": WireType("flry-a", "FLRY-A", 105.0, "Automotive thin-wall PVC, flexible stranded"),
    "flry-b": WireType("flry-b", "FLRY-B", 105.0, "Automotive thin-wall PVC, symmetrical stranded"),
    "thhn": WireType("thhn", "THHN", 90.0, "Thermoplastic, high heat, nylon coated"),
    "thwn": WireType("thwn", "THWN", 75.0, "Thermoplastic, heat/water resistant, nylon coated"),
    "xlpe": WireType("xlpe", "XLPE", 90.0, "Cross-linked polyethylene insulation"),
    "pvc": WireType("pvc", "PVC", 70.0, "Standard PVC insulation"),
    "silicon": WireType("silicon", "Silicone", 200.0, "Silicone rubber insulation, high temperature"),
    "generic": WireType("generic", "Generic", 90.0, "Generic wire type (assumes 90°C rating)"),
})

# Temperature rise above ambient caused by the installation method (°C)
INSTALLATION_TEMP_ADJUSTMENTS = MappingProxyType({
    InstallationMethod.AIR: 0.0,       # Good cooling
    InstallationMethod.CONDUIT: 10.0,  # Reduced cooling
    InstallationMethod.ISOLATED: 20.0, # Poor cooling
})

# Ampacity derating per installation method
INSTALLATION_DERATING = MappingProxyType({
    InstallationMethod.AIR: 1.00,
    InstallationMethod.CONDUIT: 0.80,
    InstallationMethod.ISOLATED: 0.70,
})

# Standard metric cross sections (mm2), ascending
METRIC_SIZES = tuple(StandardSize(a) for a in (
    0.5, 0.75, 1.0, 1.5, 2.5, 4.0, 6.0, 10.0, 16.0, 25.0, 35.0,
    50.0, 70.0, 95.0, 120.0, 150.0, 185.0, 240.0,
))

# American Wire Gauge -> mm2, ascending by area
AWG_SIZES = tuple(StandardSize(area, label) for label, area in (
    ("18", 0.823), ("16", 1.309), ("14", 2.081), ("12", 3.309),
    ("10", 5.261), ("8", 8.367), ("6", 13.30), ("4", 21.15),
    ("2", 33.62), ("1", 42.41), ("1/0", 53.49), ("2/0", 67.43),
    ("3/0", 85.01), ("4/0", 107.2),
))

# Base current rating, single copper conductor in free air at 30°C ambient
# (automotive tables, ISO 6722 / DIN 72551 style). Format: (area mm2, Amps)
BASE_AMPACITY = (
    (0.5, 9.0), (0.75, 12.0), (1.0, 15.0), (1.5, 19.0), (2.5, 26.0),
    (4.0, 35.0), (6.0, 45.0), (10.0, 61.0), (16.0, 81.0), (25.0, 106.0),
    (35.0, 131.0), (50.0, 158.0), (70.0, 200.0), (95.0, 241.0),
    (120.0, 278.0), (150.0, 318.0), (185.0, 362.0), (240.0, 424.0),
)

# Ambient temperature derating, base 30°C. Format: (Temp °C, Factor)
# Interpolated linearly between rows, clamped outside the table.
TEMP_DERATING = (
    (-20.0, 1.29), (0.0, 1.20), (10.0, 1.15), (20.0, 1.08), (30.0, 1.00),
    (40.0, 0.91), (50.0, 0.82), (60.0, 0.71), (70.0, 0.58), (80.0, 0.41),
)

# Standard fuse ratings (A): blade (ATO/ATC) up to 40 A, then MIDI/MEGA
FUSE_RATINGS = (
    1, 2, 3, 4, 5, 7.5, 10, 15, 20, 25, 30, 35, 40,
    50, 60, 70, 80, 100, 125, 150, 175, 200, 225, 250, 300, 350, 400, 500,
)


def _check_ascending(name, values):
    if any(b <= a for a, b in zip(values, values[1:])):
        raise ValueError(f"{name} must be strictly ascending")

_check_ascending("METRIC_SIZES", [s.area_mm2 for s in METRIC_SIZES])
_check_ascending("AWG_SIZES", [s.area_mm2 for s in AWG_SIZES])
_check_ascending("BASE_AMPACITY", [a for a, _ in BASE_AMPACITY])
_check_ascending("TEMP_DERATING", [t for t, _ in TEMP_DERATING])
_check_ascending("FUSE_RATINGS", FUSE_RATINGS)


def get_material(key: str) -> Material:
    k = key.strip().lower()
    if k not in MATERIALS:
        raise UnknownCatalogKeyError("material", key, MATERIALS)
    return MATERIALS[k]

def get_wire_type(key: str) -> WireType:
    k = key.strip().lower()
    if k not in WIRE_TYPES:
        raise UnknownCatalogKeyError("wire type", key, WIRE_TYPES)
    return WIRE_TYPES[k]

def get_installation(key: str) -> InstallationMethod:
    k = key.strip().lower()
    try:
        return InstallationMethod(k)
    except ValueError:
        raise UnknownCatalogKeyError("installation method", key, [m.value for m in InstallationMethod]) from None

def get_temp_derating(temp_c: float) -> float:
    """Linear interpolation over TEMP_DERATING, clamped to the end rows."""
    first_t, first_f = TEMP_DERATING[0]
    last_t, last_f = TEMP_DERATING[-1]
    if temp_c <= first_t:
        return first_f
    if temp_c >= last_t:
        return last_f

    for (t0, f0), (t1, f1) in zip(TEMP_DERATING, TEMP_DERATING[1:]):
        if t0 <= temp_c <= t1:
            return f0 + (f1 - f0) * (temp_c - t0) / (t1 - t0)
    return last_f

def get_base_ampacity(area_mm2: float) -> float:
    """Rating of the smallest table entry >= area; linear extrapolation past the end."""
    for area, amps in BASE_AMPACITY:
        if area >= area_mm2:
            return amps

    (a0, i0), (a1, i1) = BASE_AMPACITY[-2], BASE_AMPACITY[-1]
    slope = (i1 - i0) / (a1 - a0)
    extrapolated = i1 + slope * (area_mm2 - a1)
    log.debug("Area %.2f mm2 beyond ampacity table, extrapolated %.1f A", area_mm2, extrapolated)
    return extrapolated
