from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QDialog, QFormLayout, QLineEdit, QSlider, QLabel, QDialogButtonBox, QVBoxLayout,
    QGroupBox, QHBoxLayout
)

from barnmonitor.config import TARGET_TEMP_RANGE, TARGET_TEMP_DEFAULT


class AddBarnDialog(QDialog):
    """Name + target temperature form. The Store creates the barn on accept."""
    def __init__(self, parent=None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Add Barn")
        self.setMinimumWidth(360)

        layout = QVBoxLayout(self)

        grp = QGroupBox("Barn Information")
        form = QFormLayout(grp)

        self.edit_name = QLineEdit()
        self.edit_name.setPlaceholderText("Barn Name")
        form.addRow(self.edit_name)

        row = QHBoxLayout()
        row.addWidget(QLabel("Target Temperature"))
        row.addStretch()
        self.lbl_temp = QLabel()
        row.addWidget(self.lbl_temp)
        form.addRow(row)

        self.slider_temp = QSlider(Qt.Horizontal)
        self.slider_temp.setRange(*TARGET_TEMP_RANGE)
        self.slider_temp.setSingleStep(1)
        self.slider_temp.setValue(TARGET_TEMP_DEFAULT)
        self.slider_temp.valueChanged.connect(self._update_temp_label)
        form.addRow(self.slider_temp)
        self._update_temp_label(self.slider_temp.value())

        layout.addWidget(grp)

        buttons = QDialogButtonBox(QDialogButtonBox.Cancel)
        btn_add = buttons.addButton("Add", QDialogButtonBox.AcceptRole)
        btn_add.setDefault(True)
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

    def _update_temp_label(self, value: int) -> None:
        self.lbl_temp.setText(f"{value}°C")

    def barn_name(self) -> str:
        return self.edit_name.text()

    def target_temp(self) -> int:
        return self.slider_temp.value()
