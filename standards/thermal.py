from core.components import Material
from core.models import InstallationMethod
from standards.dc_tables import INSTALLATION_TEMP_ADJUSTMENTS, REFERENCE_TEMP_C

def effective_temperature(ambient_c: float, installation: InstallationMethod) -> float:
    """Ambient temperature plus the rise caused by the installation method."""
    return ambient_c + INSTALLATION_TEMP_ADJUSTMENTS[installation]

def resistivity_at(material: Material, temp_c: float) -> float:
    """
    rho(T) = rho_ref * (1 + alpha * (T - T_ref)), T_ref = 20°C.
    Not clamped: below the reference the value drops under rho_ref.
    """
    return material.resistivity_ref * (1 + material.temp_coefficient * (temp_c - REFERENCE_TEMP_C))
