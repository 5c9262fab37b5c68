"""
Dashboard Tab
Barn list with navigation to the barn detail page.
"""
import logging

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QScrollArea, QFrame,
    QStackedWidget, QDialog, QMessageBox
)

from barnmonitor.app.state import Store
from barnmonitor.model.barns import Barn
from barnmonitor.view.dialogs.add_barn_dialog import AddBarnDialog
from barnmonitor.view.widgets.barn_card import BarnCard
from barnmonitor.view.widgets.barn_detail import BarnDetailPage

logger = logging.getLogger(__name__)


class DashboardTab(QWidget):
    def __init__(self, store: Store, parent=None) -> None:
        super().__init__(parent)
        self.store = store

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)

        # Page 0: list, page 1: detail
        self.pages = QStackedWidget()
        root.addWidget(self.pages)

        # --- List page ---
        list_page = QWidget()
        list_layout = QVBoxLayout(list_page)

        header = QHBoxLayout()
        lbl_title = QLabel("Dashboard")
        lbl_title.setStyleSheet("font-size: 28px; font-weight: bold;")
        header.addWidget(lbl_title)
        header.addStretch()
        btn_add = QPushButton("+")
        btn_add.setFixedSize(36, 36)
        btn_add.setToolTip("Add Barn")
        btn_add.clicked.connect(self.on_add_barn)
        header.addWidget(btn_add)
        list_layout.addLayout(header)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.Shape.NoFrame)
        list_layout.addWidget(scroll)

        self.cards_container = QWidget()
        self.cards_layout = QVBoxLayout(self.cards_container)
        self.cards_layout.setSpacing(16)
        scroll.setWidget(self.cards_container)

        self.pages.addWidget(list_page)

        # --- Detail page ---
        self.detail = BarnDetailPage(store)
        self.detail.back_requested.connect(lambda: self.pages.setCurrentIndex(0))
        self.pages.addWidget(self.detail)

        self.store.barns_changed.connect(self.refresh_cards)
        self.refresh_cards()

    def refresh_cards(self, *_args) -> None:
        while self.cards_layout.count():
            item = self.cards_layout.takeAt(0)
            if item.widget() is not None:
                item.widget().deleteLater()

        for barn in self.store.state.barns:
            card = BarnCard(barn)
            card.clicked.connect(self.open_barn)
            self.cards_layout.addWidget(card)
        self.cards_layout.addStretch()

    def open_barn(self, barn: Barn) -> None:
        self.detail.show_barn(barn)
        self.pages.setCurrentWidget(self.detail)

    def on_add_barn(self) -> None:
        dialog = AddBarnDialog(self)
        if dialog.exec() != QDialog.DialogCode.Accepted:
            return
        try:
            self.store.add_barn(dialog.barn_name(), dialog.target_temp())
        except ValueError as e:
            logger.warning(f"Could not add barn: {e}")
            QMessageBox.warning(self, "Add Barn", str(e))
