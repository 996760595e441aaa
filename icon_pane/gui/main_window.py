"""Main window for Icon Pane GUI."""

from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from icon_pane.config import IconPaneConfig
from icon_pane.exceptions import RenderFetchError
from icon_pane.gui.constants import (
    LOAD_FAILED_TEXT,
    LOADING_TEXT,
    STATUS_MESSAGE_TIMEOUT_MS,
    WINDOW_DEFAULT_HEIGHT,
    WINDOW_DEFAULT_WIDTH,
    WINDOW_MIN_HEIGHT,
    WINDOW_MIN_WIDTH,
    WORKER_SHUTDOWN_TIMEOUT_MS,
)
from icon_pane.gui.presenters import GUIPresenter
from icon_pane.gui.styles import COLORS, FONT_SIZES, SPACING
from icon_pane.gui.widgets import IconGridWidget, MessagesWidget, QtControlFactory
from icon_pane.gui.workers import CancellableWorker, CatalogLoadWorker, RenderIconWorker
from icon_pane.interfaces import IconSetProvider, InsertionSink
from icon_pane.models import RenderedIcon, SelectionRequest
from icon_pane.orchestration import IconPaneSession, SessionState


class MainWindow(QMainWindow):
    """Main application window for Icon Pane.

    Layout, top to bottom:
    - Options bar (one control per option of the icon set)
    - Messages area (icon set warnings)
    - Error notice (failed insertions)
    - Scrollable icon grid, one group per category
    """

    def __init__(self, config: IconPaneConfig, icon_set: IconSetProvider, sink: InsertionSink):
        """Initialize the main window.

        Args:
            config: Application configuration
            icon_set: Active icon set
            sink: Destination for inserted icons
        """
        super().__init__()
        self.config = config
        self.icon_set = icon_set
        self.presenter = GUIPresenter(self)
        self._workers: list[CancellableWorker] = []
        self._ui_signalled = False

        self._setup_ui()
        self._connect_presenter_signals()

        self.session = IconPaneSession(
            icon_set=icon_set,
            surface=self.grid,
            presenter=self.presenter,
            sink=sink,
            control_factory=QtControlFactory(self.options_layout, self.options_bar),
            grid=self.grid,
            hints=config.insertion_hints,
            dispatcher=self._dispatch_selection,
            on_state_changed=self._on_session_state,
        )

    def _setup_ui(self) -> None:
        """Set up the user interface."""
        self.setWindowTitle(f"Icon Pane - {self.icon_set.name.title()} Icons")
        self.setMinimumSize(WINDOW_MIN_WIDTH, WINDOW_MIN_HEIGHT)
        self.resize(WINDOW_DEFAULT_WIDTH, WINDOW_DEFAULT_HEIGHT)

        central_widget = QWidget()
        layout = QVBoxLayout()
        layout.setContentsMargins(SPACING.sm, SPACING.sm, SPACING.sm, SPACING.sm)
        layout.setSpacing(SPACING.xs)

        self.options_bar = QWidget()
        self.options_bar.setObjectName("options")
        self.options_layout = QHBoxLayout()
        self.options_layout.setContentsMargins(0, 0, 0, 0)
        self.options_layout.setSpacing(SPACING.xs)
        self.options_bar.setLayout(self.options_layout)
        layout.addWidget(self.options_bar)

        self.messages_widget = MessagesWidget()
        layout.addWidget(self.messages_widget)

        self.notice_label = QLabel()
        self.notice_label.setObjectName("notice")
        self.notice_label.setWordWrap(True)
        self.notice_label.setStyleSheet(
            f"#notice {{ color: {COLORS.error_fg}; font-size: {FONT_SIZES.caption}px; }}"
        )
        self.notice_label.setVisible(False)
        layout.addWidget(self.notice_label)

        self.loading_label = QLabel(LOADING_TEXT)
        self.loading_label.setObjectName("loadingIcons")
        layout.addWidget(self.loading_label)

        self.grid = IconGridWidget(request_timeout=self.config.request_timeout)
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(self.grid)
        layout.addWidget(scroll, 1)

        central_widget.setLayout(layout)
        self.setCentralWidget(central_widget)

    def _connect_presenter_signals(self) -> None:
        self.presenter.info_signal.connect(self._on_info_message)
        self.presenter.warning_signal.connect(self._on_info_message)
        self.presenter.error_signal.connect(self._on_error_message)
        self.presenter.messages_signal.connect(self.messages_widget.set_messages)

    def start(self) -> None:
        """Begin startup: load the catalog and report host readiness."""
        worker = CatalogLoadWorker(self.icon_set, self)
        worker.loaded.connect(self.session.catalog_loaded)
        worker.failed.connect(self.session.catalog_failed)
        self._track_worker(worker)
        worker.start()

        # Clipboard and file sinks need no handshake with the host document
        self.session.host_ready()

    def showEvent(self, event) -> None:
        super().showEvent(event)
        if not self._ui_signalled:
            self._ui_signalled = True
            self.session.ui_ready()

    def _on_session_state(self, state: SessionState) -> None:
        if state is SessionState.READY:
            self.loading_label.setVisible(False)
            self.grid.icon_clicked.connect(self.session.renderer.handle_click)
        elif state is SessionState.FAILED:
            self.loading_label.setText(LOAD_FAILED_TEXT)

    def _dispatch_selection(self, request: SelectionRequest) -> None:
        """Fetch a selected icon on a worker thread; insert on the UI thread."""
        self.notice_label.setVisible(False)
        self.statusBar().showMessage(f"Fetching {request.identity.name}...")

        worker = RenderIconWorker(self.session.renderer, request, self)
        worker.rendered.connect(self._on_icon_rendered)
        worker.failed.connect(self._on_icon_failed)
        worker.error.connect(self._on_error_message)
        self._track_worker(worker)
        worker.start()

    def _on_icon_rendered(self, request: SelectionRequest, icon: RenderedIcon) -> None:
        self.session.renderer.deliver(request, icon)
        self.statusBar().showMessage(f"Inserted {icon.name}", STATUS_MESSAGE_TIMEOUT_MS)

    def _on_icon_failed(self, request: SelectionRequest, error: RenderFetchError) -> None:
        self.session.renderer.report_failure(request, error)

    def _track_worker(self, worker: CancellableWorker) -> None:
        self._workers.append(worker)
        worker.finished.connect(lambda: self._forget_worker(worker))

    def _forget_worker(self, worker: CancellableWorker) -> None:
        if worker in self._workers:
            self._workers.remove(worker)
        worker.deleteLater()

    def _on_info_message(self, message: str) -> None:
        self.statusBar().showMessage(message, STATUS_MESSAGE_TIMEOUT_MS)

    def _on_error_message(self, message: str) -> None:
        self.statusBar().clearMessage()
        self.notice_label.setText(message)
        self.notice_label.setVisible(True)

    def closeEvent(self, event) -> None:
        """Drop results of in-flight requests before closing."""
        self.grid.shutdown(WORKER_SHUTDOWN_TIMEOUT_MS)
        for worker in list(self._workers):
            worker.shutdown(WORKER_SHUTDOWN_TIMEOUT_MS)
        super().closeEvent(event)
