from formula_specs import FORMULAS, evaluate
from input_store import (
    clear_values,
    field_keys,
    initial_values,
    set_value,
    shared_keys,
    widget_key,
    widget_keys_for,
)


def test_field_keys_are_unique_and_ordered():
    keys = field_keys()
    assert len(keys) == len(set(keys)) == 25
    assert keys[:2] == ["altitudeChangeFt", "distanceNM"]
    assert keys[-1] == "customMinutes"


def test_initial_values_use_declared_defaults():
    values = initial_values()
    assert values["bankDeg"] == "30"
    assert all(v == "" for k, v in values.items() if k != "bankDeg")
    assert set(values) == set(field_keys())


def test_clear_values_resets_in_place():
    store = {"rNM": "2", "tasKt": "150", "leftover": "1"}
    result = clear_values(store)
    assert result is store
    assert "leftover" not in store
    assert store["rNM"] == ""
    assert store["bankDeg"] == "30"


def test_shared_keys():
    assert shared_keys() == {
        "rNM": ["leadRadial", "leadDME", "turningDistance", "loss90"],
        "arcingDME": ["leadRadial", "leadDME", "arcDistance"],
    }


def test_shared_key_feeds_every_calculator():
    store = initial_values()
    set_value(store, "rNM", "2")
    set_value(store, "arcingDME", "15")
    assert evaluate("leadDME", store) == {"inbound": 13, "outbound": 17}
    assert evaluate("loss90", store)["lossNM"] > 0
    assert evaluate("turningDistance", store)["turnDistNM"] == 0


def test_set_value_stores_strings():
    store = {}
    set_value(store, "tasKt", 150)
    set_value(store, "bankDeg", None)
    assert store == {"tasKt": "150", "bankDeg": ""}


def test_widget_keys():
    assert widget_key("loss90", "rNM") == "loss90.rNM"
    assert widget_keys_for("arcingDME") == [
        "leadRadial.arcingDME",
        "leadDME.arcingDME",
        "arcDistance.arcingDME",
    ]
    assert widget_keys_for("hatFt") == ["vdp.hatFt"]
    assert len(widget_keys_for("rNM", FORMULAS[:7])) == 1
