from __future__ import annotations

import pytest

from coinrefill.model.capacities import (
    DISPLAY_ORDER,
    Denomination,
    MAX_CAPACITIES,
    MachineId,
    get_capacity,
    machine_denominations,
)
from coinrefill.model.state import DenominationState, FormState, MachineState


def test_capacity_table_matches_machines() -> None:
    assert dict(MAX_CAPACITIES[MachineId.K11]) == {
        Denomination.CENT_10: 770,
        Denomination.CENT_20: 500,
        Denomination.CENT_50: 400,
        Denomination.EURO_2: 380,
    }
    assert dict(MAX_CAPACITIES[MachineId.K12]) == {
        Denomination.CENT_10: 1000,
        Denomination.CENT_50: 500,
        Denomination.EURO_2: 600,
    }


def test_capacity_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        MAX_CAPACITIES[MachineId.K11][Denomination.CENT_10] = 1  # type: ignore[index]
    with pytest.raises(TypeError):
        MAX_CAPACITIES["K13"] = {}  # type: ignore[index]


def test_rounding_steps() -> None:
    assert Denomination.CENT_50.rounding_step == 50
    assert Denomination.EURO_2.rounding_step == 50
    assert Denomination.CENT_10.rounding_step == 100
    assert Denomination.CENT_20.rounding_step == 100


def test_display_order_covers_every_tube() -> None:
    for machine, order in DISPLAY_ORDER.items():
        assert set(order) == set(MAX_CAPACITIES[machine])
    assert machine_denominations("K11")[0] == Denomination.CENT_50
    assert machine_denominations(MachineId.K12)[0] == Denomination.CENT_10


def test_get_capacity_lookup_and_unknown_pairs() -> None:
    assert get_capacity("K12", "2Euro") == 600

    with pytest.raises(KeyError):
        get_capacity("K12", "20ct")
    with pytest.raises(KeyError):
        get_capacity("K13", "10ct")
    with pytest.raises(KeyError):
        get_capacity("K11", "5ct")


def test_denomination_state_set_current() -> None:
    state = DenominationState(MachineId.K11, Denomination.CENT_50, capacity=400)

    assert state.row.new_total == ""
    assert state.set_current("350") is True
    assert state.set_current("350") is False
    assert state.row.refill == 50
    assert state.row.new_total == "400"


def test_machine_state_follows_display_order() -> None:
    machine = MachineState(MachineId.K11)

    assert [s.denomination for s in machine] == list(DISPLAY_ORDER[MachineId.K11])
    assert machine.get("10ct").capacity == 770

    with pytest.raises(KeyError):
        MachineState(MachineId.K12).get(Denomination.CENT_20)


def test_form_state_set_current_returns_row() -> None:
    form = FormState()

    row = form.set_current("K12", "10ct", "120")

    assert row.refill == 800
    assert row.new_total == "920"
    assert form.machine(MachineId.K12).get(Denomination.CENT_10).current == "120"
    # other machine untouched
    assert form.machine(MachineId.K11).get(Denomination.CENT_10).current == ""


def _all_currents(form: FormState) -> list[str]:
    return [state.current for machine in form.machines.values() for state in machine]


def test_form_state_reset() -> None:
    form = FormState()

    form.set_current("K11", "50ct", "500")
    form.set_current("K12", "2Euro", "10")
    assert form.machine("K11").full_denominations() == [Denomination.CENT_50]

    form.reset()

    assert set(_all_currents(form)) == {""}
    assert form.machine("K11").full_denominations() == []


@pytest.mark.parametrize("text", ["abc", "12abc", "   "])
def test_non_numeric_input_is_stored_as_not_entered(text) -> None:
    form = FormState()

    row = form.set_current("K11", "50ct", text)

    assert form.machine("K11").get("50ct").current == ""
    assert row.refill == ""
    assert row.refill_display == ""
    assert row.new_total == ""


def test_whitespace_around_number_is_stripped() -> None:
    row = FormState().set_current("K11", "10ct", " 0 ")

    assert row.refill == 700
    assert row.new_total == "700"


def test_non_numeric_text_replaces_previous_value() -> None:
    state = DenominationState(MachineId.K11, Denomination.CENT_10, capacity=770)
    state.set_current("100")

    assert state.set_current("1x") is True
    assert state.current == ""
    assert state.set_current("abc") is False


def test_form_state_unknown_machine() -> None:
    with pytest.raises(KeyError):
        FormState().machine("K13")
