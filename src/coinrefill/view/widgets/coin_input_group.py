"""
Coin Input Group
================
One row of the form: the entered coin count of a tube, the calculated refill
quantity and the resulting new total.
"""
from PySide6.QtWidgets import QWidget, QVBoxLayout, QGridLayout, QLabel, QLineEdit
from PySide6.QtCore import Signal, Qt

from coinrefill.model.refill import RefillRow
from coinrefill.model.state import DenominationState

FIELD_WIDTH = 80

CURRENT_STYLE = "QLineEdit { border: 1px solid #d1d5db; border-radius: 6px; padding: 2px; }"
REFILL_STYLE = (
    "QLineEdit { background-color: #fef9c3; color: #4b5563; font-weight: bold; font-style: italic;"
    " border: 1px solid #d1d5db; border-radius: 6px; padding: 2px; }"
)
NEW_TOTAL_STYLE = (
    "QLineEdit { background-color: #a3e635; color: #1f2937; font-weight: bold;"
    " border: 1px solid #d1d5db; border-radius: 6px; padding: 2px; }"
)


class CoinInputGroup(QWidget):
    # Emitted with the raw text whenever the user edits the current count
    value_changed = Signal(str)

    def __init__(self, state: DenominationState, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.state = state
        short_label = state.denomination.label.split(" ")[0]

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 8)

        self.lbl_title = QLabel(
            f"{state.denomination.label} "
            f"(<span style='color:#dc2626; font-weight:bold;'>Max: {state.capacity}</span> Stk.):"
        )
        self.lbl_title.setTextFormat(Qt.RichText)
        layout.addWidget(self.lbl_title)

        grid = QGridLayout()
        grid.setHorizontalSpacing(8)

        # --- Aktuell (editable) ---
        self.edit_current = QLineEdit()
        self.edit_current.setObjectName(f"aktuelle-{state.denomination}")
        self.edit_current.setPlaceholderText("Stk.")
        self.edit_current.setFixedWidth(FIELD_WIDTH)
        self.edit_current.setAlignment(Qt.AlignCenter)
        self.edit_current.setStyleSheet(CURRENT_STYLE)
        self.edit_current.setAccessibleName(f"Anzahl {short_label} Münzen (aktuell)")
        self.edit_current.textEdited.connect(self.on_text_edited)

        # --- Nachfüllen (read-only) ---
        self.edit_refill = self._make_readonly_field(
            f"nachfuellen-{state.denomination}", REFILL_STYLE,
            f"Benötigte {short_label} Münzen zum Nachfüllen"
        )

        # --- Neuer Stand (read-only) ---
        self.edit_new_total = self._make_readonly_field(
            f"neuer-stand-{state.denomination}", NEW_TOTAL_STYLE,
            f"Neuer Stand {short_label} Münzen"
        )

        for col, (caption, field) in enumerate((
            ("Aktuell:", self.edit_current),
            ("Nachfüllen:", self.edit_refill),
            ("Neuer Stand:", self.edit_new_total),
        )):
            lbl = QLabel(caption)
            lbl.setStyleSheet("font-size: 11px; color: #374151;")
            grid.addWidget(lbl, 0, col)
            grid.addWidget(field, 1, col)

        layout.addLayout(grid)

        self.load_from_state()

    @staticmethod
    def _make_readonly_field(name: str, style: str, accessible_name: str) -> QLineEdit:
        field = QLineEdit()
        field.setObjectName(name)
        field.setReadOnly(True)
        field.setFocusPolicy(Qt.NoFocus)
        field.setFixedWidth(FIELD_WIDTH)
        field.setAlignment(Qt.AlignCenter)
        field.setStyleSheet(style)
        field.setAccessibleName(accessible_name)
        return field

    # --- SLOTS ---

    def on_text_edited(self, text: str) -> None:
        self.value_changed.emit(text)

    def show_row(self, row: RefillRow) -> None:
        self.edit_refill.setText(row.refill_display)
        self.edit_new_total.setText(row.new_total)

    def load_from_state(self) -> None:
        """Sync all three fields with the model (e.g. after a reset)."""
        if self.edit_current.text() != self.state.current:
            self.edit_current.setText(self.state.current)
        self.show_row(self.state.row)
