"""
Main Application Window
=======================
The primary GUI container that holds the tab bar and the two pages.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It switches between the Dashboard and Ammonia pages.
"""
from PySide6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QTabBar, QStackedWidget
from PySide6.QtGui import QAction

from barnmonitor.app.state import Store
from barnmonitor.config import VISIBLE_APP_NAME
from barnmonitor.view.tabs.tab_dashboard import DashboardTab
from barnmonitor.view.tabs.tab_ammonia import AmmoniaTab


class MainWindow(QMainWindow):
    def __init__(self, store: Store) -> None:
        super().__init__()
        self.store = store

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(480, 900)

        main_widget = QWidget()
        self.setCentralWidget(main_widget)
        main_layout = QVBoxLayout(main_widget)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        # --- PAGES ---
        self.pages = QStackedWidget()
        self.dashboard_tab = DashboardTab(store)
        self.ammonia_tab = AmmoniaTab(store)
        self.pages.addWidget(self.dashboard_tab)  # Index 0
        self.pages.addWidget(self.ammonia_tab)  # Index 1
        main_layout.addWidget(self.pages)

        # --- BOTTOM TAB BAR ---
        self.tab_bar = QTabBar()
        self.tab_bar.setShape(QTabBar.RoundedSouth)
        self.tab_bar.setExpanding(True)
        self.tab_bar.addTab("Dashboard")
        self.tab_bar.addTab("Ammonia")
        self.tab_bar.setStyleSheet("""
                    QTabBar::tab { height: 44px; min-width: 100px; }
                    QTabBar::tab:selected { font-weight: bold; color: #34C759; }
                """)
        main_layout.addWidget(self.tab_bar)

        self.tab_bar.currentChanged.connect(self.pages.setCurrentIndex)

        self._create_actions()

    def _create_actions(self) -> None:
        act_reset = QAction("Reset sample data", self)
        act_reset.setShortcut("Ctrl+R")
        act_reset.triggered.connect(self.store.reset)
        self.addAction(act_reset)

        act_quit = QAction("Quit", self)
        act_quit.setShortcut("Ctrl+Q")
        act_quit.triggered.connect(self.close)
        self.addAction(act_quit)
