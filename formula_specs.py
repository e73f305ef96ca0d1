"""
AIS 60:1 formula catalogue

Each entry declares its input fields, output fields, display equation and a
pure compute function reading raw strings from the shared input store.
"""

import logging
import math
from dataclasses import dataclass
from typing import Callable, Dict, Mapping, Optional, Tuple

from nav_math import ft_per_nm_from_degrees, safe_divisor, to_num, turn_radius_nm

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InputField:
    key: str
    label: str
    default: Optional[str] = None
    optional: bool = False  # advisory only, missing values still fall back


@dataclass(frozen=True)
class OutputField:
    key: str
    label: str


@dataclass(frozen=True)
class Formula:
    id: str
    title: str
    fields: Tuple[InputField, ...]
    outputs: Tuple[OutputField, ...]
    compute: Callable[[Mapping[str, str]], Dict[str, Optional[float]]]
    equation: Optional[str] = None

    @property
    def field_keys(self):
        return tuple(f.key for f in self.fields)

    @property
    def output_keys(self):
        return tuple(o.key for o in self.outputs)


# ---------- compute functions ----------

def _gradient(v):
    return {
        'gradientFtPerNM': to_num(v.get('altitudeChangeFt')) / safe_divisor(to_num(v.get('distanceNM'))),
    }


def _pitch(v):
    return {'pitchDeg': to_num(v.get('gradientPercent')) / 100 + to_num(v.get('xCorrectionDeg'))}


def _ias_to_tas(v):
    ktas = to_num(v.get('iasKt')) + 5 * (to_num(v.get('pressureAltFt')) / 1000)
    return {'ktas': ktas, 'tasNMmin': ktas / 60}


def _avg_tas(v):
    avg = (to_num(v.get('tasLow')) + to_num(v.get('tasHigh'))) / 2
    return {'avgTasKt': avg, 'avgTasNMmin': avg / 60}


def _vvi(v):
    gradient = to_num(v.get('gradientFtPerNM'))
    tas_nm_min = to_num(v.get('tasNMmin'), None)
    tas_nm_hr = to_num(v.get('tasNMhr'), None)

    if not math.isfinite(gradient):
        return {'vviFPM': None}

    # NM/min wins when both are given
    if tas_nm_min is not None:
        tas_final = tas_nm_min
    elif tas_nm_hr is not None:
        tas_final = tas_nm_hr / 60
    else:
        return {'vviFPM': None}

    return {'vviFPM': gradient * tas_final}


def _turn_radius(v):
    return {'rNM': turn_radius_nm(v.get('tasKt'), v.get('bankDeg'))}


def _lead_radial(v):
    lead = (60 * to_num(v.get('rNM'))) / safe_divisor(to_num(v.get('arcingDME')))
    radial = to_num(v.get('interceptRadial'))
    return {'leadDegMinus': radial - lead, 'leadDegPlus': radial + lead}


def _lead_dme(v):
    dme = to_num(v.get('arcingDME'))
    r = to_num(v.get('rNM'))
    return {'inbound': dme - r, 'outbound': dme + r}


def _arc_distance(v):
    spread = abs(to_num(v.get('startRadial')) - to_num(v.get('endRadial')))
    return {'arcNM': (spread / 60) * to_num(v.get('arcingDME'))}


def _turning_distance(v):
    return {'turnDistNM': (to_num(v.get('degrees')) / 360) * 2 * math.pi * to_num(v.get('rNM'))}


def _loss_90(v):
    r = to_num(v.get('rNM'))
    arc = (90 / 360) * 2 * math.pi * r
    return {'lossNM': 2 * r - arc}


def _climb_descend(v):
    return {
        'nm': to_num(v.get('altitudeToClimbFt')) / safe_divisor(to_num(v.get('climbGradientFtPerNM'))),
    }


def _vdp(v):
    ft_per_nm = ft_per_nm_from_degrees(to_num(v.get('slopeDeg')))
    return {'vdpNM': to_num(v.get('hatFt')) / safe_divisor(ft_per_nm), 'ftPerNM': ft_per_nm}


def _time_out(v):
    nm_per_min = to_num(v.get('groundSpeedKt')) / 60
    custom = to_num(v.get('customMinutes'))
    return {
        'dist3min': nm_per_min * 3,
        'dist2min': nm_per_min * 2,
        'dist1min': nm_per_min * 1,
        'distCustom': nm_per_min * custom if custom else None,
    }


# ---------- catalogue ----------

FORMULAS = (
    Formula(
        id='gradient',
        title='1) Gradient (ft/NM)',
        fields=(
            InputField('altitudeChangeFt', 'Altitude Change (ft)'),
            InputField('distanceNM', 'Distance Traveled (NM)'),
        ),
        outputs=(OutputField('gradientFtPerNM', 'Gradient (ft/NM)'),),
        compute=_gradient,
        equation='Gradient (ft/NM) = Δ Altitude (ft) ÷ Distance (NM)',
    ),
    Formula(
        id='pitch',
        title='2) Pitch from Gradient',
        fields=(
            InputField('gradientPercent', 'Gradient (%)'),
            InputField('xCorrectionDeg', 'Level Pitch Attitude x° (optional)', optional=True),
        ),
        outputs=(OutputField('pitchDeg', 'Pitch to Fly (°)'),),
        compute=_pitch,
        equation='Pitch (°) = (Gradient (%) ÷ 100) + Level Pitch (°)',
    ),
    Formula(
        id='ias2tas',
        title='3) IAS → TAS (and NM/min)',
        fields=(
            InputField('iasKt', 'IAS (kt)'),
            InputField('pressureAltFt', 'Altitude (ft, ~PA)'),
        ),
        outputs=(
            OutputField('ktas', 'TAS (kt)'),
            OutputField('tasNMmin', 'TAS (NM/min)'),
        ),
        compute=_ias_to_tas,
        equation='TAS (kt) ≈ IAS + 5 × (Altitude ÷ 1000)\nTAS (NM/min) = TAS ÷ 60',
    ),
    Formula(
        id='avgTas',
        title='4) Average TAS',
        fields=(
            InputField('tasLow', 'TAS @ lower alt (kt)'),
            InputField('tasHigh', 'TAS @ higher alt (kt)'),
        ),
        outputs=(
            OutputField('avgTasKt', 'Average TAS (kt)'),
            OutputField('avgTasNMmin', 'Average TAS (NM/min)'),
        ),
        compute=_avg_tas,
        equation='Average TAS = (TAS_low + TAS_high) ÷ 2\nAverage TAS (NM/min) = Average TAS ÷ 60',
    ),
    Formula(
        id='vvi',
        title='5) VVI from Gradient & TAS',
        fields=(
            InputField('gradientFtPerNM', 'Gradient (ft/NM)'),
            InputField('tasNMmin', 'TAS (NM/min, optional)', optional=True),
            InputField('tasNMhr', 'TAS (NM/hr, optional)', optional=True),
        ),
        outputs=(OutputField('vviFPM', 'VVI (ft/min)'),),
        compute=_vvi,
        equation='VVI (ft/min) = Gradient (ft/NM) × TAS (NM/min)\n(or TAS (NM/hr) ÷ 60)',
    ),
    Formula(
        id='turnRadius',
        title='6) Turn Radius (bank-aware physics)',
        fields=(
            InputField('tasKt', 'TAS (kt)'),
            InputField('bankDeg', 'Bank Angle (°)', default='30'),
        ),
        outputs=(OutputField('rNM', 'Turn Radius (NM)'),),
        compute=_turn_radius,
        equation='r (NM) = (V² ÷ (g × tan φ)) ÷ 6076.12',
    ),
    Formula(
        id='leadRadial',
        title='7) Lead Radial (deg)',
        fields=(
            InputField('rNM', 'Turn Radius r (NM)'),
            InputField('arcingDME', 'Arcing DME (NM)'),
            InputField('interceptRadial', 'Intercept Radial (deg)'),
        ),
        outputs=(
            OutputField('leadDegMinus', 'Lead Radial (−) deg'),
            OutputField('leadDegPlus', 'Lead Radial (+) deg'),
        ),
        compute=_lead_radial,
        equation='Lead (°) = (60 × r) ÷ Arcing DME',
    ),
    Formula(
        id='leadDME',
        title='8) Lead DME (NM)',
        fields=(
            InputField('arcingDME', 'Arcing DME (NM)'),
            InputField('rNM', 'Turn Radius r (NM)'),
        ),
        outputs=(
            OutputField('inbound', 'Lead DME inbound (NM)'),
            OutputField('outbound', 'Lead DME outbound (NM)'),
        ),
        compute=_lead_dme,
        equation='Lead DME = Arcing DME ± r',
    ),
    Formula(
        id='arcDistance',
        title='9) Arcing Distance (NM)',
        fields=(
            InputField('startRadial', 'Starting Radial (deg)'),
            InputField('endRadial', 'Ending Radial (deg)'),
            InputField('arcingDME', 'Arcing DME (NM)'),
        ),
        outputs=(OutputField('arcNM', 'Arcing Distance (NM)'),),
        compute=_arc_distance,
        equation='Arc Distance (NM) = (|Start − End| ÷ 60) × Arcing DME',
    ),
    Formula(
        id='turningDistance',
        title='10) Turning Distance for N°',
        fields=(
            InputField('degrees', 'Turn Amount (deg)'),
            InputField('rNM', 'Turn Radius r (NM)'),
        ),
        outputs=(OutputField('turnDistNM', 'Turning Distance (NM)'),),
        compute=_turning_distance,
        equation='Turn Distance (NM) = (Degrees ÷ 360) × 2πr',
    ),
    Formula(
        id='loss90',
        title='11) Distance Lost to a 90° Turn',
        fields=(InputField('rNM', 'Turn Radius r (NM)'),),
        outputs=(OutputField('lossNM', 'Distance Lost (NM)'),),
        compute=_loss_90,
        equation='Loss (NM) = (2 × r) − (πr ÷ 2)',
    ),
    Formula(
        id='climbDescend',
        title='12) Distance to Climb/Descend (NM)',
        fields=(
            InputField('altitudeToClimbFt', 'Δ Altitude (ft)'),
            InputField('climbGradientFtPerNM', 'Climb/Descent Gradient (ft/NM)'),
        ),
        outputs=(OutputField('nm', 'Distance (NM)'),),
        compute=_climb_descend,
        equation='Distance (NM) = Δ Altitude (ft) ÷ Gradient (ft/NM)',
    ),
    Formula(
        id='vdp',
        title='13) VDP (NM from Threshold)',
        fields=(
            InputField('hatFt', 'HAT (ft)'),
            InputField('slopeDeg', 'Glideslope/VDA (deg)'),
        ),
        outputs=(
            OutputField('vdpNM', 'VDP (NM)'),
            OutputField('ftPerNM', 'Slope (ft/NM)'),
        ),
        compute=_vdp,
        equation='VDP (NM) = HAT (ft) ÷ Slope (ft/NM)\nSlope (ft/NM) = 6076.12 × tan(Slope °)',
    ),
    Formula(
        id='timeOut',
        title='14) Distance for 3-2-1 (and Custom) Minutes Out',
        fields=(
            InputField('groundSpeedKt', 'Groundspeed (kt)'),
            InputField('customMinutes', 'Custom Minutes Out (optional)', optional=True),
        ),
        outputs=(
            OutputField('dist3min', '3 min out (NM)'),
            OutputField('dist2min', '2 min out (NM)'),
            OutputField('dist1min', '1 min out (NM)'),
            OutputField('distCustom', 'Custom min out (NM)'),
        ),
        compute=_time_out,
        equation='Distance (NM) = (Groundspeed ÷ 60) × Time (min)',
    ),
)

FORMULAS_BY_ID = {f.id: f for f in FORMULAS}


def get_formula(formula_id):
    try:
        return FORMULAS_BY_ID[formula_id]
    except KeyError:
        raise KeyError(f"Unknown formula: {formula_id!r}") from None


def evaluate(formula, values):
    """Run one formula against the input store.

    Accepts a Formula or its id. The result always carries every declared
    output key; anything the compute function leaves out comes back as None.
    """
    if isinstance(formula, str):
        formula = get_formula(formula)
    result = formula.compute(values or {})
    outputs = {key: result.get(key) for key in formula.output_keys}
    logger.debug(f"Evaluated {formula.id}: {outputs}")
    return outputs


def evaluate_all(values, formulas=FORMULAS):
    return {f.id: evaluate(f, values) for f in formulas}


def validate_inputs(formula, values):
    """Advisory warnings for non-empty fields that do not parse as numbers."""
    warnings = []
    values = values or {}
    for field in formula.fields:
        raw = values.get(field.key)
        if raw is None or not str(raw).strip():
            continue
        if to_num(raw, None) is None:
            fallback = 'ignored' if field.optional else 'treated as 0'
            warnings.append(f"{field.label}: '{raw}' is not a number ({fallback}).")
    return warnings
