"""
Form State (Data Model)
=======================
This module defines the state behind the refill form.

Why is this file needed?
------------------------
1. State Management: It holds the entered coin counts of both machines in one
   place, one holder per (machine, denomination) pair.
2. Derivation: Refill quantity and new total are never stored, they are
   recomputed from the entered value whenever it is read.
3. Decoupling: Views write entered text into this object and read the derived
   rows back; the model knows nothing about Qt.

Classes:
    DenominationState: Entered value of one dispenser tube.
    MachineState: All tubes of one machine, in display order.
    FormState: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Dict, Iterator, List

from coinrefill.model.capacities import (
    Denomination, MachineId, MAX_CAPACITIES, get_capacity, machine_denominations
)
from coinrefill.model.refill import EMPTY, RefillRow, derive_row, normalize_input

logger = logging.getLogger(__name__)


@dataclass
class DenominationState:
    machine: MachineId
    denomination: Denomination
    capacity: int
    current: str = EMPTY

    @property
    def row(self) -> RefillRow:
        return derive_row(self.current, self.capacity, self.denomination)

    def set_current(self, text: str) -> bool:
        """
        Store the entered text. Text that is not one complete number is
        stored as EMPTY. Returns True if the stored value changed.
        """
        text = normalize_input(text)
        if text == self.current:
            return False
        self.current = text
        logger.debug("%s/%s current set to %r", self.machine, self.denomination, text)
        return True

    def clear(self) -> None:
        self.current = EMPTY


@dataclass
class MachineState:
    machine: MachineId
    denominations: Dict[Denomination, DenominationState] = field(init=False)

    def __post_init__(self) -> None:
        self.machine = MachineId(self.machine)
        self.denominations = {
            denomination: DenominationState(
                machine=self.machine,
                denomination=denomination,
                capacity=get_capacity(self.machine, denomination),
            )
            for denomination in machine_denominations(self.machine)
        }

    def __iter__(self) -> Iterator[DenominationState]:
        return iter(self.denominations.values())

    def get(self, denomination: Denomination | str) -> DenominationState:
        try:
            return self.denominations[Denomination(denomination)]
        except ValueError:
            raise KeyError(f"Unknown denomination '{denomination}'") from None
        except KeyError:
            raise KeyError(f"Machine {self.machine} has no '{denomination}' tube") from None

    def reset(self) -> None:
        for state in self:
            state.clear()

    def full_denominations(self) -> List[Denomination]:
        """Denominations whose entered count already reached capacity."""
        return [state.denomination for state in self if state.row.capacity_reached]


@dataclass
class FormState:
    """
    Holds the whole form (both machines).
    Pass this instance to the views.
    """
    machines: Dict[MachineId, MachineState] = field(init=False)

    def __post_init__(self) -> None:
        self.machines = {machine: MachineState(machine) for machine in MAX_CAPACITIES}

    def machine(self, machine: MachineId | str) -> MachineState:
        try:
            return self.machines[MachineId(machine)]
        except ValueError:
            raise KeyError(f"Unknown machine '{machine}'") from None

    def set_current(self, machine: MachineId | str, denomination: Denomination | str, text: str) -> RefillRow:
        """Update one input field and return the freshly derived row."""
        state = self.machine(machine).get(denomination)
        state.set_current(text)
        return state.row

    def reset(self) -> None:
        """Clear all entered values"""
        for machine_state in self.machines.values():
            machine_state.reset()
        logger.info("Form state has been reset.")
