import logging
import streamlit as st
import pandas as pd
from core import config
from core.converters import format_weight
from core.errors import SizingError
from core.export import summary_rows, sizes_frame, to_excel_bytes
from core.models import InstallationMethod, TemperatureStatus
from core.validation import build_request
from standards.dc_logic import calculate_sizing
from standards.dc_tables import MATERIALS, WIRE_TYPES, INSTALLATION_TEMP_ADJUSTMENTS

logging.basicConfig(level=config.LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

# --- Page Config ---
st.set_page_config(
    page_title="DC Cable Calculator",
    page_icon="⚡",
    layout="wide",
    initial_sidebar_state="expanded"
)

st.markdown("""
<style>
    .main-header { font-family: 'Inter', sans-serif; color: #1E3A8A; font-weight: 700; }
    .stDataFrame { border-radius: 10px; overflow: hidden; }
</style>
""", unsafe_allow_html=True)

# --- Sidebar ---
with st.sidebar:
    st.title("Reference")
    st.caption(f"Maximum system voltage: {config.MAX_VOLTAGE:g} V")
    st.markdown("##### Wire types")
    st.dataframe(
        pd.DataFrame([
            {"Type": w.name, "Max °C": w.max_temp_c, "Description": w.description}
            for w in WIRE_TYPES.values()
        ]),
        hide_index=True,
        use_container_width=True,
    )
    st.info("Engineering estimate only. Verify critical installations against the applicable electrical code.")

st.markdown("<h1 class='main-header'>⚡ DC Cable Diameter Calculator</h1>", unsafe_allow_html=True)
st.markdown("---")

with st.form("sizing_form"):
    st.markdown("##### ⚡ Electrical Data")
    c_v, c_i, c_l, c_d = st.columns(4)
    voltage = c_v.number_input("System Voltage (V)", min_value=0.0, max_value=float(config.MAX_VOLTAGE), value=12.0, step=1.0)
    current = c_i.number_input("Current (A)", min_value=0.0, value=10.0, step=1.0)
    length = c_l.number_input("Cable Length (m)", min_value=0.0, value=5.0, step=0.5)
    drop = c_d.number_input("Max. Voltage Drop (%)", min_value=0.0, max_value=float(config.MAX_VOLTAGE_DROP_PERCENT),
                            value=float(config.DEFAULT_VOLTAGE_DROP_PERCENT), step=0.5)

    st.markdown("##### 📏 Installation and Environment")
    c_rt, c_mat, c_t, c_tu = st.columns([1.2, 1.2, 1, 0.6])
    round_trip = c_rt.selectbox("Length", ["One-way", "Round trip"]) == "Round trip"
    material = c_mat.selectbox("Material", list(MATERIALS), format_func=lambda k: MATERIALS[k].name)
    ambient = c_t.number_input("Ambient Temperature", value=float(config.DEFAULT_AMBIENT_TEMP), step=1.0)
    temp_unit = c_tu.selectbox("Unit", ["C", "F"])

    c_inst, c_wire = st.columns(2)
    installation = c_inst.selectbox(
        "Installation Method",
        [m.value for m in InstallationMethod],
        format_func=lambda v: f"{InstallationMethod(v).display_name} (+{INSTALLATION_TEMP_ADJUSTMENTS[InstallationMethod(v)]:g}°C)",
    )
    wire_type = c_wire.selectbox(
        "Wire Type",
        list(WIRE_TYPES),
        index=list(WIRE_TYPES).index("generic"),
        format_func=lambda k: f"{WIRE_TYPES[k].name} (Max: {WIRE_TYPES[k].max_temp_c:.0f}°C)",
    )

    submitted = st.form_submit_button("Calculate", type="primary", use_container_width=True)

if submitted:
    try:
        request = build_request(
            voltage, current, length,
            max_drop_percent=drop, round_trip=round_trip, material=material,
            ambient_temp=ambient, temp_unit=temp_unit, installation=installation, wire_type=wire_type,
        )
        st.session_state.result = calculate_sizing(request)
    except SizingError as e:
        st.session_state.pop("result", None)
        st.error(str(e))

result = st.session_state.get("result")

if result is not None:
    st.markdown("### 📋 Results")

    temp = result.temperature
    if temp.status == TemperatureStatus.UNSAFE:
        st.error(f"⚠️ {temp.message}\n\nThe calculated cable size may not be safe for this wire type!")
    elif temp.status == TemperatureStatus.CAUTION:
        st.warning(f"⚠️ {temp.message}")

    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Required Area", f"{result.required_area_mm2:.2f} mm²")
    c2.metric("Required Diameter", f"{result.required_diameter_mm:.2f} mm")
    c3.metric("Effective Temp.", f"{result.effective_temp_c:.1f} °C")
    c4.metric("Weight", format_weight(result.required_weight_g))

    c5, c6 = st.columns(2)
    c5.metric("Metric", result.metric.size.display_name,
              f"{'-' if result.metric.is_fallback else '+'}{result.metric.margin_mm2:.2f} mm²")
    c6.metric("AWG", result.awg.size.display_name,
              f"{'-' if result.awg.is_fallback else '+'}{result.awg.margin_mm2:.2f} mm²")

    st.dataframe(sizes_frame(result), hide_index=True, use_container_width=True)

    other = [w for w in result.warnings if w != temp.message]
    for w in other:
        st.warning(w)

    with st.expander("Input summary"):
        st.table(pd.DataFrame(summary_rows(result), columns=["Parameter", "Value"]))

    st.download_button(
        "📥 Download Report (Excel)",
        data=to_excel_bytes(result),
        file_name="dc_cable_sizing.xlsx",
        mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    )
