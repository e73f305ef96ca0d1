"""
Flat key -> raw string store shared by every calculator.

Keys are not namespaced per formula: `rNM` typed in one section is the same
value every other section reads, so a radius worked out once feeds the lead
radial, lead DME, turning distance and 90° loss calculators.
"""

import logging

from formula_specs import FORMULAS

logger = logging.getLogger(__name__)


def field_keys(formulas=FORMULAS):
    keys = []
    for formula in formulas:
        for field in formula.fields:
            if field.key not in keys:
                keys.append(field.key)
    return keys


def initial_values(formulas=FORMULAS):
    values = {}
    for formula in formulas:
        for field in formula.fields:
            # first declared default wins for shared keys
            if not values.get(field.key):
                values[field.key] = field.default or ''
    return values


def clear_values(store, formulas=FORMULAS):
    store.clear()
    store.update(initial_values(formulas))
    logger.info(f"Cleared input store ({len(store)} fields)")
    return store


def set_value(store, key, raw):
    store[key] = '' if raw is None else str(raw)
    return store


def shared_keys(formulas=FORMULAS):
    owners = {}
    for formula in formulas:
        for field in formula.fields:
            owners.setdefault(field.key, []).append(formula.id)
    return {key: ids for key, ids in owners.items() if len(ids) > 1}


def widget_key(formula_id, field_key):
    return f"{formula_id}.{field_key}"


def widget_keys_for(field_key, formulas=FORMULAS):
    return [widget_key(f.id, field_key) for f in formulas if field_key in f.field_keys]
