import streamlit as st

from pubquality import ui
from pubquality.aggregate import aggregate
from pubquality.config import configure_logging, data_source
from pubquality.constants import QUALITY_LABELS
from pubquality.storage import records_to_csv
from pubquality.ui_helpers import get_expanded, last_load_error, load_records_cached, on_toggle

st.set_page_config(page_title="Calidad de Publicaciones", layout="wide")
configure_logging()
ui.init_page()

ui.render_page_header("Análisis de Calidad de Publicaciones")


# ---------------------------------------------------------------------------
# Data
# ---------------------------------------------------------------------------

source = data_source()
with st.spinner("Cargando publicaciones..."):
    records = load_records_cached(source)
view = aggregate(records)
expanded = get_expanded()

load_error = last_load_error()
if load_error:
    st.warning(f"No se pudieron cargar las publicaciones: {load_error}")

# ---------------------------------------------------------------------------
# 1. Distribution + average
# ---------------------------------------------------------------------------

left, right = st.columns(2)
with left:
    with ui.card("Distribución de Calidades"):
        ui.render_distribution(view)
with right:
    with ui.card("Puntuación Promedio"):
        ui.render_average(view)

# ---------------------------------------------------------------------------
# 2. Per-quality detail
# ---------------------------------------------------------------------------

with ui.card("Detalle de Publicaciones"):
    for quality in QUALITY_LABELS:
        ui.quality_section(quality, view.group(quality), expanded == quality, on_toggle)

st.download_button(
    "Descargar CSV",
    data=records_to_csv(records),
    file_name="publicaciones_calidad.csv",
    mime="text/csv",
    disabled=not records,
)
