"""Machine Catalogue (Coin Capacities) - Parkautomaten K11/K12."""
from types import MappingProxyType
from typing import Mapping, Tuple
from enum import StrEnum


# ------------------------------------------------------------------------------
# Enums
# ------------------------------------------------------------------------------
class MachineId(StrEnum):
    K11 = "K11"
    K12 = "K12"


class Denomination(StrEnum):
    """Coin types accepted by the machines."""
    CENT_10 = "10ct"
    CENT_20 = "20ct"
    CENT_50 = "50ct"
    EURO_2 = "2Euro"

    @property
    def label(self) -> str:
        return DENOMINATION_LABELS[self]

    @property
    def rounding_step(self) -> int:
        """Roll/bag size the refill quantity is rounded to."""
        if self in COARSE_DENOMINATIONS:
            return COARSE_STEP
        return FINE_STEP


# ------------------------------------------------------------------------------
# Rounding steps
# ------------------------------------------------------------------------------
COARSE_STEP: int = 50
FINE_STEP: int = 100

COARSE_DENOMINATIONS = frozenset({Denomination.CENT_50, Denomination.EURO_2})

DENOMINATION_LABELS: Mapping[Denomination, str] = MappingProxyType({
    Denomination.CENT_10: "10 Cent Münzen",
    Denomination.CENT_20: "20 Cent Münzen",
    Denomination.CENT_50: "50 Cent Münzen",
    Denomination.EURO_2: "2 Euro Münzen",
})

# ------------------------------------------------------------------------------
# Catalogue
# ------------------------------------------------------------------------------
# Maximum number of coins each dispenser tube holds.
MAX_CAPACITIES: Mapping[MachineId, Mapping[Denomination, int]] = MappingProxyType({
    MachineId.K11: MappingProxyType({
        Denomination.CENT_10: 770,
        Denomination.CENT_20: 500,
        Denomination.CENT_50: 400,
        Denomination.EURO_2: 380,
    }),
    MachineId.K12: MappingProxyType({
        Denomination.CENT_10: 1000,
        Denomination.CENT_50: 500,
        Denomination.EURO_2: 600,
    }),
})

# Order in which the coin groups are shown on each machine panel
# (matches the physical tube order on the machine).
DISPLAY_ORDER: Mapping[MachineId, Tuple[Denomination, ...]] = MappingProxyType({
    MachineId.K11: (
        Denomination.CENT_50,
        Denomination.CENT_20,
        Denomination.EURO_2,
        Denomination.CENT_10,
    ),
    MachineId.K12: (
        Denomination.CENT_10,
        Denomination.CENT_50,
        Denomination.EURO_2,
    ),
})


def _resolve_machine(machine: MachineId | str) -> MachineId:
    try:
        return MachineId(machine)
    except ValueError:
        raise KeyError(f"Unknown machine '{machine}'") from None


def get_capacity(machine: MachineId | str, denomination: Denomination | str) -> int:
    """
    Look up the maximum capacity of one dispenser tube.

    Raises:
        KeyError: if the machine is unknown or does not take that denomination.
    """
    capacities = MAX_CAPACITIES[_resolve_machine(machine)]
    try:
        return capacities[Denomination(denomination)]
    except ValueError:
        raise KeyError(f"Unknown denomination '{denomination}'") from None


def machine_denominations(machine: MachineId | str) -> Tuple[Denomination, ...]:
    return DISPLAY_ORDER[_resolve_machine(machine)]
