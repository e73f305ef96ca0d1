import math
import re

FT_PER_NM = 6076.12
KT_TO_FTPS = 1.68781
G_FTPS2 = 32.174
EPSILON = 1e-9
ZERO_BANK_SURROGATE_RAD = 0.0001

# Leading float literal, same prefix rule as a browser's parseFloat
_FLOAT_PREFIX = re.compile(r'^\s*([+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)')


def to_num(value, fallback=0):
    """Parse a raw field string, returning fallback when it is not a finite number."""
    text = '' if value is None else str(value)
    match = _FLOAT_PREFIX.match(text.replace(',', ''))
    if not match:
        return fallback
    number = float(match.group(1))
    return number if math.isfinite(number) else fallback


def safe_divisor(value):
    # NaN passes through so the result reads as "cannot compute"
    if math.isnan(value):
        return value
    return max(EPSILON, value)


def _tan(rad):
    # math.tan raises on +/-inf; huge degree inputs overflow to inf
    if not math.isfinite(rad):
        return math.nan
    return math.tan(rad)


def ft_per_nm_from_degrees(deg):
    return FT_PER_NM * _tan((deg * math.pi) / 180)


def turn_radius_nm(tas_kt, bank_deg):
    """Bank-aware turn radius: r_ft = V^2 / (g * tan(phi)), V in ft/s, phi in rad."""
    v_fts = to_num(tas_kt) * KT_TO_FTPS  # knots -> ft/s
    phi = (to_num(bank_deg) * math.pi) / 180
    r_ft = (v_fts * v_fts) / (G_FTPS2 * _tan(phi or ZERO_BANK_SURROGATE_RAD))
    return r_ft / FT_PER_NM  # ft -> NM
