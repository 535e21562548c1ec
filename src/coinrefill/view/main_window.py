"""
Main Application Window
=======================
The primary GUI container that holds the Menu Bar, the heading and the two
machine panels.

Why is this file needed?
------------------------
1. Layout: It places the K11 and K12 panels side by side.
2. Routing: It connects global actions (like Datei -> Neu) to the form state.
"""
import logging
from typing import Dict

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel
)
from PySide6.QtCore import Qt
from PySide6.QtGui import QAction

from coinrefill.config import VISIBLE_APP_NAME
from coinrefill.model.capacities import MachineId
from coinrefill.model.state import FormState
from coinrefill.view.machine_panel import MachinePanel

logger = logging.getLogger(__name__)

STATUS_TIMEOUT_MS = 4000


class MainWindow(QMainWindow):
    def __init__(self, form_state: FormState) -> None:
        super().__init__()
        self.form: FormState = form_state

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(900, 700)

        # --- MAIN CONTAINER ---
        main_widget = QWidget()
        main_widget.setObjectName("main")
        main_widget.setStyleSheet(
            "QWidget#main { background: qlineargradient(x1:0, y1:0, x2:1, y2:1,"
            " stop:0 #60a5fa, stop:1 #9333ea); }"
        )
        self.setCentralWidget(main_widget)

        outer_layout = QVBoxLayout(main_widget)
        outer_layout.setContentsMargins(16, 16, 16, 16)

        card = QWidget()
        card.setObjectName("card")
        card.setStyleSheet("QWidget#card { background-color: white; border-radius: 16px; }")
        outer_layout.addWidget(card)

        card_layout = QVBoxLayout(card)
        card_layout.setContentsMargins(32, 32, 32, 32)

        heading = QLabel(VISIBLE_APP_NAME)
        heading.setAlignment(Qt.AlignCenter)
        heading.setStyleSheet("font-size: 28px; font-weight: bold; color: #1f2937; margin-bottom: 24px;")
        card_layout.addWidget(heading)

        # --- MACHINE PANELS (side by side) ---
        panels_layout = QHBoxLayout()
        panels_layout.setSpacing(24)

        self.panels: Dict[MachineId, MachinePanel] = {}
        for machine in self.form.machines:
            panel = MachinePanel(self.form, machine)
            panel.data_changed.connect(self.on_data_changed)
            panels_layout.addWidget(panel)
            self.panels[machine] = panel

        card_layout.addLayout(panels_layout)

        # --- ACTIONS & MENUS ---
        self._create_actions()
        self._create_menus()

        self.statusBar()

    def _create_actions(self) -> None:
        self.act_new = QAction("Neu", self)
        self.act_new.setShortcut("Ctrl+N")
        self.act_new.triggered.connect(self.on_form_new)

        self.act_exit = QAction("Beenden", self)
        self.act_exit.triggered.connect(self.close)

    def _create_menus(self) -> None:
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu("&Datei")
        file_menu.addAction(self.act_new)
        file_menu.addSeparator()
        file_menu.addAction(self.act_exit)

    # --- SLOTS ---

    def on_data_changed(self, machine: str, denomination: str) -> None:
        """Slot called when an input field of a machine panel changes."""
        full = self.form.machine(machine).full_denominations()
        if not full:
            self.statusBar().clearMessage()
            return

        labels = ", ".join(d.label for d in full)
        self.statusBar().showMessage(f"{machine}: {labels} - Max. erreicht", STATUS_TIMEOUT_MS)

    def on_form_new(self) -> None:
        self.form.reset()
        self.refresh_ui_from_state()
        self.statusBar().clearMessage()

    def refresh_ui_from_state(self) -> None:
        """Force all widgets to read from the form state again."""
        for panel in self.panels.values():
            panel.blockSignals(True)
            try:
                panel.load_from_state()
            finally:
                panel.blockSignals(False)
