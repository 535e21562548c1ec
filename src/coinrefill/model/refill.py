"""
Refill Calculator
=================
Computes how many coins of one denomination have to be added to a dispenser
tube so that it is filled up to (but never beyond) its maximum capacity.

Coins are delivered in rolls/bags, so the refill quantity is rounded to the
rounding step of the denomination (50 for 50ct and 2 Euro, 100 otherwise).

Functions:
    parse_count: Permissive text -> number conversion used for the input fields.
    round_half_up: Arithmetic rounding to a multiple of a step.
    compute_refill: The refill quantity for one tube.
    derive_row: All values displayed for one coin input group.
"""
from __future__ import annotations

from dataclasses import dataclass
import math
import re
from typing import Union

from coinrefill.model.capacities import Denomination

# Marker for "nothing entered yet". Propagated instead of a number.
EMPTY: str = ""

CAPACITY_REACHED_TEXT: str = "Max. erreicht !!!"

# Longest leading decimal literal, e.g. "12abc" -> "12", " 3,5 " -> "3,5"
_LEADING_NUMBER = re.compile(r"\s*([+-]?(?:\d+(?:[.,]\d*)?|[.,]\d+)(?:[eE][+-]?\d+)?)")

RefillValue = Union[int, str]


def normalize_input(text: str) -> str:
    """
    Reduce the text of an input field to what a number field would report:
    the stripped text if it is one complete finite number, EMPTY otherwise
    ("abc", "12abc" and blank text all count as not entered).
    """
    stripped = (text or EMPTY).strip()
    match = _LEADING_NUMBER.fullmatch(stripped)
    if match is None:
        return EMPTY
    if not math.isfinite(float(match.group(1).replace(",", "."))):
        return EMPTY
    return stripped


def parse_count(text: str) -> float:
    """
    Convert user input to a number. Anything that does not start with a
    number is treated as zero; a decimal comma is accepted. An overflowing
    value such as "1e999" stays infinite (always at capacity), a negative
    overflow counts as zero.
    """
    match = _LEADING_NUMBER.match(text or "")
    if match is None:
        return 0.0
    value = float(match.group(1).replace(",", "."))
    if math.isnan(value) or value == -math.inf:
        return 0.0
    return value


def round_half_up(value: float, step: int) -> int:
    """Round to the nearest multiple of step; ties go up (not to even)."""
    return int(math.floor(value / step + 0.5)) * step


def compute_refill(current: str, capacity: int, denomination: Denomination | str) -> RefillValue:
    """
    Calculate the number of coins needed for a refill.

    Args:
        current: The current number of coins as entered (may be empty).
        capacity: Maximum capacity of the tube.
        denomination: Coin type, selects the rounding step.

    Returns:
        The non-negative refill quantity, or EMPTY if nothing was entered.
    """
    if current == EMPTY:
        return EMPTY

    parsed_current = parse_count(current)

    # Already full (or overfull): nothing to add
    if parsed_current >= capacity:
        return 0

    needed = capacity - parsed_current
    step = Denomination(denomination).rounding_step

    rounded_needed = round_half_up(needed, step)

    # Never round up past the actual shortfall, fall back to the previous multiple
    if rounded_needed > needed and needed > 0:
        rounded_needed = int(math.floor(needed / step)) * step

    return max(0, rounded_needed)


def format_count(value: float) -> str:
    """Render a count without a trailing '.0' for whole numbers."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


@dataclass(frozen=True)
class RefillRow:
    """Derived values for one coin input group."""
    refill: RefillValue
    refill_display: str
    new_total: str
    capacity_reached: bool


def derive_row(current: str, capacity: int, denomination: Denomination | str) -> RefillRow:
    """Compute everything the read-only fields of a coin input group show."""
    refill = compute_refill(current, capacity, denomination)

    if current == EMPTY:
        return RefillRow(refill=EMPTY, refill_display=EMPTY, new_total=EMPTY, capacity_reached=False)

    parsed_current = parse_count(current)
    capacity_reached = parsed_current >= capacity

    refill_display = CAPACITY_REACHED_TEXT if capacity_reached else format_count(refill)
    new_total = format_count(parsed_current + refill)

    return RefillRow(
        refill=refill,
        refill_display=refill_display,
        new_total=new_total,
        capacity_reached=capacity_reached,
    )
