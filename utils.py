import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

import numpy as np
import plotly.graph_objects as go

from nav_math import to_num, turn_radius_nm

PLACEHOLDER = "—"

UNIT_TIPS = (
    "VVI = (ft/NM) × (NM/min) ⇒ ft/min.",
    "IAS→TAS uses +5 kt per 1000 ft (rule-of-thumb).",
    "Turn radius uses bank angle (default 30°).",
    "Lead Radial ≈ 60·r / DME. Lead DME ≈ DME ± r.",
    "VDP computed from HAT / (ft per NM at slope). 3° ≈ 318 ft/NM.",
)


def format_output(value, decimals=3):
    """Fixed-point text for finite numbers, an em dash for anything else"""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return PLACEHOLDER
    if not math.isfinite(value):
        return PLACEHOLDER
    if value == 0:
        value = 0.0  # no "-0.000"
    # ties round away from zero on the exact binary value
    exact = Decimal(value)
    with localcontext() as ctx:
        ctx.prec = max(exact.adjusted(), 0) + decimals + 2
        rounded = exact.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)
    return f"{rounded:f}"


def create_turn_radius_plot(tas_kt, current_bank_deg):
    """Create a Plotly figure of turn radius against bank angle for one TAS"""
    tas = to_num(tas_kt)
    if tas <= 0:
        return None

    banks = np.arange(5, 61, 1)
    radii = [turn_radius_nm(tas, b) for b in banks]
    if not all(math.isfinite(r) for r in radii):
        return None

    fig = go.Figure()

    fig.add_trace(go.Scatter(
        x=banks,
        y=radii,
        mode='lines',
        name=f'{tas:g} kt',
        line=dict(color='#314785', width=2)
    ))

    # Mark the bank angle currently entered
    bank = to_num(current_bank_deg)
    if 5 <= bank <= 60:
        fig.add_trace(go.Scatter(
            x=[bank],
            y=[turn_radius_nm(tas, bank)],
            mode='markers',
            name='Current bank',
            marker=dict(size=12, color='#FFD580', symbol='circle')
        ))

    fig.update_layout(
        title="Turn Radius vs Bank Angle",
        xaxis_title="Bank angle (°)",
        yaxis_title="Turn radius (NM)",
        showlegend=True,
    )

    return fig
