def fahrenheit_to_celsius(f: float) -> float:
    return (f - 32) * 5 / 9

def celsius_to_fahrenheit(c: float) -> float:
    return c * 9 / 5 + 32

def to_celsius(val: float, unit: str) -> float:
    """Returns temperature in degC. Unit is 'C' or 'F' (case-insensitive)."""
    unit = unit.strip().upper()
    if unit == "F": return fahrenheit_to_celsius(val)
    if unit == "C": return val
    raise ValueError(f"Unknown temperature unit '{unit}'")

def format_weight(weight_grams: float) -> str:
    # Compared after rounding so 999.96 g reads 1.00 kg, not 1000.0 g
    if round(weight_grams, 1) >= 1000:
        return f"{weight_grams / 1000:.2f} kg"
    return f"{weight_grams:.1f} g"
