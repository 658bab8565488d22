import datetime
import io
from typing import List, Optional, Tuple
import pandas as pd
from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill
from core.converters import format_weight, celsius_to_fahrenheit
from core.models import SizingResult, TemperatureUnit
from standards.dc_tables import METRIC_SIZES, AWG_SIZES, FUSE_RATINGS

def summary_rows(result: SizingResult) -> List[Tuple[str, str]]:
    """Parameter / value pairs shown by both front ends and the Excel summary."""
    req = result.request
    unit = req.temp_unit.value
    rows = [
        ("System Voltage", f"{req.voltage:.1f} V"),
        ("Current", f"{req.current:.2f} A"),
        ("Cable Length", f"{req.length_m:.2f} m ({'round trip' if req.round_trip else 'one-way'})"),
        ("Maximum Voltage Drop", f"{req.max_drop_percent:.2f}% ({req.max_drop_volts:.2f} V)"),
        ("Material", req.material.name),
        ("Wire Type", f"{req.wire_type.name} (Max: {req.wire_type.max_temp_c:.0f}°C) - {req.wire_type.description}"),
        ("Ambient Temperature", f"{req.ambient_temp:.1f}°{unit} ({req.ambient_temp_c:.1f}°C)"),
        ("Installation Method", req.installation.display_name),
        ("Effective Operating Temperature",
         f"{result.effective_temp_c:.1f}°C ({celsius_to_fahrenheit(result.effective_temp_c):.1f}°F)"
         if req.temp_unit == TemperatureUnit.FAHRENHEIT else f"{result.effective_temp_c:.1f}°C"),
        ("Resistivity at Operating Temperature", f"{result.resistivity:.4f} Ω·mm²/m"),
        ("Required Cross-Sectional Area", f"{result.required_area_mm2:.2f} mm²"),
        ("Required Diameter", f"{result.required_diameter_mm:.2f} mm"),
        ("Conductor Weight (required area)", format_weight(result.required_weight_g)),
        ("Temperature Check", result.temperature.status.value.upper()),
    ]
    return rows

def sizes_frame(result: SizingResult) -> pd.DataFrame:
    """Metric vs AWG comparison, one row per standard table."""
    rows = []
    for kind, sel, drop, prot, safe, weight in (
        ("Metric", result.metric, result.metric_drop, result.metric_protection, result.min_safe_metric, result.metric_weight_g),
        ("AWG", result.awg, result.awg_drop, result.awg_protection, result.min_safe_awg, result.awg_weight_g),
    ):
        rows.append({
            "Standard": kind,
            "Size": sel.size.display_name,
            "Area (mm²)": round(sel.size.area_mm2, 3),
            "Margin (mm²)": round(sel.margin_mm2, 2),
            "Fit": "Largest available (deficit)" if sel.is_fallback else "Rounded up",
            "Drop (V)": round(drop.volts, 3),
            "Drop (%)": round(drop.percent, 2),
            "Ampacity (A)": round(prot.ampacity_a, 1) if prot else None,
            "Fuse (A)": prot.fuse_a if prot else None,
            "Min. Safe Size": safe.size.display_name if safe else None,
            "Weight": format_weight(weight),
        })
    return pd.DataFrame(rows)

def build_workbook(result: SizingResult) -> Workbook:
    wb = Workbook()

    header_fill = PatternFill(start_color="DDDDDD", end_color="DDDDDD", fill_type="solid")
    header_font = Font(bold=True)

    # --- Sheet 1: Summary ---
    ws1 = wb.active
    ws1.title = "Summary"
    ws1.append(["DC CABLE SIZING"])
    ws1.append(["Date:", datetime.datetime.now().strftime("%Y-%m-%d %H:%M")])
    ws1.append([])
    ws1.append(["Parameter", "Value"])
    for cell in ws1[4]:
        cell.font = header_font
        cell.fill = header_fill
    for row in summary_rows(result):
        ws1.append(list(row))
    if result.warnings:
        ws1.append([])
        ws1.append(["Warnings"])
        for w in result.warnings:
            ws1.append(["", w])
    ws1.column_dimensions["A"].width = 38
    ws1.column_dimensions["B"].width = 60

    # --- Sheet 2: Standard sizes ---
    ws2 = wb.create_sheet("Sizes")
    df = sizes_frame(result)
    ws2.append(list(df.columns))
    for cell in ws2[1]:
        cell.font = header_font
        cell.fill = header_fill
    for values in df.itertuples(index=False):
        ws2.append(list(values))
    for col in ws2.columns:
        ws2.column_dimensions[col[0].column_letter].width = 18

    # --- Sheet 3: Reference tables ---
    ws3 = wb.create_sheet("Reference")
    ws3.append(["Metric (mm²)", "AWG", "AWG (mm²)", "Fuse (A)"])
    for cell in ws3[1]:
        cell.font = header_font
    for idx in range(max(len(METRIC_SIZES), len(AWG_SIZES), len(FUSE_RATINGS))):
        metric = METRIC_SIZES[idx].area_mm2 if idx < len(METRIC_SIZES) else None
        awg_label = AWG_SIZES[idx].label if idx < len(AWG_SIZES) else None
        awg_area = AWG_SIZES[idx].area_mm2 if idx < len(AWG_SIZES) else None
        fuse = FUSE_RATINGS[idx] if idx < len(FUSE_RATINGS) else None
        ws3.append([metric, awg_label, awg_area, fuse])

    return wb

def to_excel_bytes(result: SizingResult) -> bytes:
    output = io.BytesIO()
    build_workbook(result).save(output)
    return output.getvalue()

def export_to_excel(result: SizingResult, filename: Optional[str] = None) -> str:
    if filename is None:
        filename = f"DC_Cable_Sizing_{datetime.datetime.now().strftime('%Y%m%d_%H%M%S')}.xlsx"
    build_workbook(result).save(filename)
    return filename
