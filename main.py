import logging
import sys
from core import config
from core.converters import format_weight
from core.errors import SizingError
from core.export import export_to_excel, summary_rows
from core.models import SizingResult, TemperatureStatus
from core.validation import build_request, parse_number, parse_voltage, parse_positive, parse_drop_percent
from standards.dc_logic import calculate_sizing
from standards.dc_tables import MATERIALS, WIRE_TYPES

def ask(prompt: str) -> str:
    return input(prompt).strip()

def get_required_inputs():
    # Voltage, current and length have no default: invalid input stops the program
    voltage = parse_voltage(ask("Enter system voltage (V): "))
    current = parse_positive(ask("Enter current (A): "), "current", "Current")
    length = parse_positive(ask("Enter cable length (m): "), "length", "Length")
    return voltage, current, length

def get_optional_inputs():
    drop = config.DEFAULT_VOLTAGE_DROP_PERCENT
    drop_str = ask(f"Enter maximum voltage drop percentage (default {drop:g}%): ")
    if drop_str:
        try:
            drop = parse_drop_percent(drop_str)
        except SizingError:
            print(f"Warning: Invalid voltage drop percentage. Using default {config.DEFAULT_VOLTAGE_DROP_PERCENT:g}%.")
            drop = config.DEFAULT_VOLTAGE_DROP_PERCENT

    round_trip = ask("Is this round trip length? (y/n, default: n): ").lower() in ("y", "yes")

    material = ask("Cable material (copper/aluminum, default: copper): ").lower()
    if material not in MATERIALS:
        material = "copper"
        print("Using default: Copper")

    unit = ask("Temperature unit (C/F, default: C): ").upper()
    if unit not in ("C", "F"):
        unit = "C"

    try:
        ambient = parse_number(ask("Enter ambient temperature: "), "ambient_temp")
    except SizingError:
        print(f"Error: Invalid temperature. Using default {config.DEFAULT_AMBIENT_TEMP:g}°C.")
        ambient = config.DEFAULT_AMBIENT_TEMP
        unit = "C"

    installation = ask("Installation method (air/conduit/isolated, default: air): ").lower()
    if installation not in ("air", "conduit", "isolated", ""):
        print("Using default: In air")
    if installation not in ("conduit", "isolated"):
        installation = "air"

    wire_type = ask(f"Wire type ({'/'.join(WIRE_TYPES)}, default: generic): ").lower()
    if wire_type not in WIRE_TYPES:
        wire_type = "generic"
        print("Using default: Generic (90°C)")

    return drop, round_trip, material, ambient, unit, installation, wire_type

def print_results(result: SizingResult):
    print()
    print("=== Calculation Results ===")
    for name, value in summary_rows(result):
        print(f"{name}: {value}")

    temp = result.temperature
    if temp.status == TemperatureStatus.UNSAFE:
        print()
        print("⚠️  " + temp.message)
        print("   The calculated cable size may not be safe for this wire type!")
        print("   Consider: using a higher temperature rated wire, reducing ambient temperature,")
        print("   improving cooling, or increasing cable size to reduce heat generation.")
    elif temp.status == TemperatureStatus.CAUTION:
        print()
        print("⚠️  " + temp.message)

    metric, awg = result.metric, result.awg
    print()
    print("=== Recommended Standard Sizes ===")
    for sel, weight in ((metric, result.metric_weight_g), (awg, result.awg_weight_g)):
        fit = "largest available, short by" if sel.is_fallback else "rounded up by"
        print(f"{'AWG' if sel.size.is_awg else 'Metric'}: {sel.size.display_name} ({fit} {sel.margin_mm2:.2f} mm², weight {format_weight(weight)})")

    print()
    print("=== Voltage Drop with Recommended Sizes ===")
    print(f"With {metric.size.display_name}: {result.metric_drop.volts:.2f} V ({result.metric_drop.percent:.2f}%)")
    print(f"With {awg.size.display_name}: {result.awg_drop.volts:.2f} V ({result.awg_drop.percent:.2f}%)")

    print()
    print("=== Current Capacity & Protection ===")
    for sel, prot in ((metric, result.metric_protection), (awg, result.awg_protection)):
        print(f"{sel.size.display_name}: ampacity {prot.ampacity_a:.1f} A | Fuse {prot.fuse_a:g} A")
    for safe in (result.min_safe_metric, result.min_safe_awg):
        mark = "" if safe.is_safe else " (!) NOT SAFE"
        print(f"Minimum size for {safe.required_a:.1f} A: {safe.size.display_name} ({safe.ampacity_a:.1f} A){mark}")

    other = [w for w in result.warnings if w != temp.message]
    if other:
        print()
        print("=== Warnings ===")
        for w in other:
            print(f"(!) {w}")

def main():
    logging.basicConfig(level=config.LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    print("=== DC Cable Diameter Calculator ===")
    print(f"Supports 12V, 24V, 48V DC systems up to {config.MAX_VOLTAGE:g}V")
    print()

    try:
        voltage, current, length = get_required_inputs()
    except SizingError as e:
        print(f"Error: {e}")
        sys.exit(1)

    drop, round_trip, material, ambient, unit, installation, wire_type = get_optional_inputs()

    try:
        request = build_request(
            voltage, current, length,
            max_drop_percent=drop, round_trip=round_trip, material=material,
            ambient_temp=ambient, temp_unit=unit, installation=installation, wire_type=wire_type,
        )
        result = calculate_sizing(request)
    except SizingError as e:
        print(f"Error: {e}")
        sys.exit(1)

    print_results(result)

    if ask("\nExport report to Excel? (y/n): ").lower() in ("y", "yes"):
        filename = export_to_excel(result)
        print(f"\n[INFO] Excel report written: {filename}")

if __name__ == "__main__":
    main()
