"""
Machine Panel
"""
import logging
from functools import partial
from typing import Dict

from PySide6.QtWidgets import QGroupBox, QVBoxLayout, QWidget
from PySide6.QtCore import Signal

from coinrefill.model.capacities import Denomination, MachineId
from coinrefill.model.state import FormState
from coinrefill.view.widgets.coin_input_group import CoinInputGroup

logger = logging.getLogger(__name__)

PANEL_COLORS: Dict[MachineId, tuple[str, str]] = {
    MachineId.K11: ("#dbeafe", "#93c5fd"),  # blue
    MachineId.K12: ("#f3e8ff", "#d8b4fe"),  # purple
}


class MachinePanel(QGroupBox):
    # (machine, denomination) of the field that changed
    data_changed = Signal(str, str)

    def __init__(self, form_state: FormState, machine: MachineId, parent: QWidget | None = None) -> None:
        super().__init__(str(machine), parent)
        self.form = form_state
        self.machine = MachineId(machine)
        self.machine_state = self.form.machine(self.machine)

        background, border = PANEL_COLORS.get(self.machine, ("#f3f4f6", "#d1d5db"))
        self.setStyleSheet(
            f"QGroupBox {{ background-color: {background}; border: 1px solid {border};"
            f" border-radius: 12px; margin-top: 28px; padding: 16px; }}"
            "QGroupBox::title { subcontrol-origin: margin; subcontrol-position: top center;"
            " font-size: 20px; font-weight: 600; text-decoration: underline; }"
        )

        layout = QVBoxLayout(self)

        self.groups: Dict[Denomination, CoinInputGroup] = {}
        for state in self.machine_state:
            group = CoinInputGroup(state)
            group.value_changed.connect(partial(self.on_value_changed, state.denomination))
            layout.addWidget(group)
            self.groups[state.denomination] = group

        layout.addStretch()

    # --- SLOTS ---

    def on_value_changed(self, denomination: Denomination, text: str) -> None:
        row = self.form.set_current(self.machine, denomination, text)
        self.groups[denomination].show_row(row)
        if row.capacity_reached:
            logger.debug("%s/%s reached capacity", self.machine, denomination)
        self.data_changed.emit(str(self.machine), str(denomination))

    def load_from_state(self) -> None:
        for group in self.groups.values():
            group.load_from_state()
