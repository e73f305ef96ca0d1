# results_export.py
import logging

import pandas as pd

from formula_specs import FORMULAS, evaluate
from input_store import field_keys
from nav_math import to_num
from utils import format_output

logger = logging.getLogger(__name__)

RESULT_COLUMNS = ["formula", "title", "output", "label", "value", "display"]


def results_frame(values, formulas=FORMULAS, decimals=3):
    rows = []
    for formula in formulas:
        out = evaluate(formula, values)
        for o in formula.outputs:
            rows.append({
                "formula": formula.id,
                "title": formula.title,
                "output": o.key,
                "label": o.label,
                "value": out[o.key],
                "display": format_output(out[o.key], decimals),
            })
    return pd.DataFrame(rows, columns=RESULT_COLUMNS)


def inputs_frame(values, formulas=FORMULAS):
    values = values or {}
    rows = []
    for key in field_keys(formulas):
        raw = values.get(key, "")
        rows.append({"field": key, "raw": raw, "parsed": to_num(raw, None)})
    return pd.DataFrame(rows, columns=["field", "raw", "parsed"])


def export_csv(values, formulas=FORMULAS, decimals=3):
    df = results_frame(values, formulas, decimals)
    logger.info(f"Exporting {len(df)} results to CSV")
    return df.to_csv(index=False).encode("utf-8")
