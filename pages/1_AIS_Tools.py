import logging
import os
import sys
from datetime import datetime

import streamlit as st

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from config import DISPLAY_DECIMALS, LOG_LEVEL, SHOW_PLOTS
from formula_specs import FORMULAS, evaluate, validate_inputs
from input_store import clear_values, initial_values, set_value, widget_key, widget_keys_for
from results_export import export_csv, inputs_frame, results_frame
from utils import UNIT_TIPS, create_turn_radius_plot, format_output

# Configure logging
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

STORE_KEY = "ais_values"


def sync_field(field_key, source_key):
    """Copy one widget's text into the store and every widget sharing its key."""
    raw = st.session_state[source_key]
    set_value(st.session_state[STORE_KEY], field_key, raw)
    for other in widget_keys_for(field_key):
        if other != source_key:
            st.session_state[other] = raw


def clear_all():
    store = clear_values(st.session_state[STORE_KEY])
    for formula in FORMULAS:
        for field in formula.fields:
            st.session_state[widget_key(formula.id, field.key)] = store[field.key]


def render_formula(formula, values):
    with st.container(border=True):
        st.subheader(formula.title)

        # Inputs
        for field in formula.fields:
            wk = widget_key(formula.id, field.key)
            st.text_input(field.label, key=wk, on_change=sync_field, args=(field.key, wk))

        for warning in validate_inputs(formula, values):
            st.warning(warning)

        if formula.equation:
            st.code(formula.equation, language=None)

        # Outputs
        out = evaluate(formula, values)
        cols = st.columns(len(formula.outputs))
        for col, o in zip(cols, formula.outputs):
            with col:
                st.metric(o.label, format_output(out[o.key], DISPLAY_DECIMALS))

        if formula.id == "turnRadius" and SHOW_PLOTS:
            fig = create_turn_radius_plot(values.get("tasKt"), values.get("bankDeg"))
            if fig is not None:
                st.plotly_chart(fig)


st.set_page_config(page_title="AIS 60:1 Tools", page_icon="🛩️", layout="centered")

if STORE_KEY not in st.session_state:
    st.session_state[STORE_KEY] = initial_values()
values = st.session_state[STORE_KEY]

for formula in FORMULAS:
    for field in formula.fields:
        wk = widget_key(formula.id, field.key)
        if wk not in st.session_state:
            st.session_state[wk] = values.get(field.key, "")

st.title("AIS 60:1 Tools")
st.markdown("Quick calculators for gradients, TAS, turn geometry, and VDP. Units shown per field.")

for formula in FORMULAS:
    try:
        render_formula(formula, values)
    except Exception as e:
        logger.error(f"Error rendering {formula.id}: {str(e)}")
        st.error(f"❌ Error in {formula.title}: {str(e)}")

with st.container(border=True):
    st.subheader("Unit Tips & Notes")
    st.markdown("\n".join(f"- {tip}" for tip in UNIT_TIPS))
    st.button("Clear All Inputs", key="clear_all", on_click=clear_all)

with st.expander("📋 Results table", expanded=False):
    try:
        st.dataframe(results_frame(values, decimals=DISPLAY_DECIMALS))
        st.dataframe(inputs_frame(values))

        ts = datetime.now().strftime("%Y%m%d_%H%M%S")
        st.download_button(
            "⬇️ CSV",
            data=export_csv(values, decimals=DISPLAY_DECIMALS),
            file_name=f"ais_results_{ts}.csv",
            mime="text/csv",
        )
    except Exception as e:
        logger.error(f"Error building results table: {str(e)}")
        st.error(f"❌ Error building results table: {str(e)}")
