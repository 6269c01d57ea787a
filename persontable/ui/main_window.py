from __future__ import annotations

from PySide6.QtWidgets import (
    QAbstractItemView,
    QFrame,
    QHBoxLayout,
    QLabel,
    QLayout,
    QMainWindow,
    QPushButton,
    QTableView,
    QTextEdit,
    QVBoxLayout,
    QWidget,
)

from persontable.core.config import AppConfig, DEFAULT_CONFIG
from persontable.core.controller import PersonEditorController
from persontable.core.person_table import PersonTableModel
from persontable.ui.person_form import PersonFormWidget


class MainWindow(QMainWindow):
    def __init__(
        self,
        rows: PersonTableModel,
        config: AppConfig | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.config = config if config is not None else DEFAULT_CONFIG
        self.setWindowTitle(self.config.window.title)

        self._build_ui(rows)
        self.controller = PersonEditorController(
            self.form,
            rows,
            self.table.selectionModel(),
            parent=self,
        )
        self._connect_signals()

    def _build_ui(self, rows: PersonTableModel) -> None:
        window_cfg = self.config.window
        central = QFrame(self)
        central.setObjectName("root")
        central.setStyleSheet(window_cfg.style_sheet("root"))
        layout = QVBoxLayout(central)
        layout.setSpacing(window_cfg.spacing)

        self.form = PersonFormWidget()
        layout.addWidget(self.form)

        button_row = QHBoxLayout()
        self.restore_button = QPushButton("Restore Rows")
        self.delete_button = QPushButton("Delete Selected Rows")
        button_row.addWidget(self.restore_button)
        button_row.addWidget(self.delete_button)
        button_row.addStretch(1)
        layout.addLayout(button_row)

        self.table = QTableView()
        self.table.setModel(rows)
        self.table.setSelectionBehavior(QAbstractItemView.SelectionBehavior.SelectRows)
        if self.config.table.multi_select:
            self.table.setSelectionMode(QAbstractItemView.SelectionMode.ExtendedSelection)
        else:
            self.table.setSelectionMode(QAbstractItemView.SelectionMode.SingleSelection)
        self.table.horizontalHeader().setStretchLastSection(True)
        layout.addWidget(self.table, stretch=1)

        self.log_output = QTextEdit()
        self.log_output.setReadOnly(True)
        self.log_output.setMaximumHeight(100)
        self.log_label = QLabel("Event Log")
        layout.addWidget(self.log_label)
        layout.addWidget(self.log_output)
        self.log_label.setVisible(self.config.table.show_event_log)
        self.log_output.setVisible(self.config.table.show_event_log)

        self.setCentralWidget(central)
        self.setMinimumSize(window_cfg.min_width, window_cfg.min_height)
        if not window_cfg.resizable:
            layout.setSizeConstraint(QLayout.SizeConstraint.SetFixedSize)

        self.statusBar().showMessage(f"{len(rows)} rows")

    def _connect_signals(self) -> None:
        self.form.add_requested.connect(self.controller.add_person)
        self.restore_button.clicked.connect(self.controller.restore_rows)
        self.delete_button.clicked.connect(self.controller.delete_selected_rows)
        self.controller.log_emitted.connect(self._append_log)
        self.controller.rows_changed.connect(self._on_rows_changed)
        self.table.selectionModel().selectionChanged.connect(self._on_selection_changed)

    def _append_log(self, message: str) -> None:
        self.log_output.append(message)
        self.statusBar().showMessage(message, 5000)

    def _on_rows_changed(self, count: int) -> None:
        self.statusBar().showMessage(f"{count} rows")

    def _on_selection_changed(self, *_args) -> None:
        rows = {index.row() for index in self.table.selectionModel().selectedIndexes()}
        if len(rows) != 1:
            return
        person = self.controller.rows.person_at(rows.pop())
        self.statusBar().showMessage(
            f"{person.first_name} {person.last_name}: {person.get_age_category().name}"
        )
