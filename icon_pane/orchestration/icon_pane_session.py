"""Session orchestration: startup barrier, options and catalog grid."""

import logging
from collections.abc import Callable
from enum import Enum

from icon_pane.exceptions import CatalogLoadError
from icon_pane.interfaces import (
    IconSetProvider,
    InsertionSink,
    PresentationSurface,
    PresenterProtocol,
)
from icon_pane.models import IconCatalog, InsertionHints
from icon_pane.orchestration.catalog_renderer import (
    CatalogGrid,
    CatalogRenderer,
    SelectionDispatcher,
)
from icon_pane.orchestration.options_controller import ControlFactory, OptionsController
from icon_pane.orchestration.startup_barrier import StartupBarrier

logger = logging.getLogger(__name__)


class SessionState(Enum):
    """Lifecycle of an icon pane session."""

    WAITING = "waiting"  # Startup signals outstanding
    READY = "ready"  # Options built, catalog rendered
    FAILED = "failed"  # A startup signal failed; nothing was built


class IconPaneSession:
    """Wires an icon set to the options controller and catalog renderer.

    Nothing is built until the UI, the host document and the catalog are
    all ready. If any of them fails, the session stays unbuilt: no option
    controls and no category groups.
    """

    UI_SIGNAL = "ui"
    HOST_SIGNAL = "host"
    CATALOG_SIGNAL = "catalog"

    def __init__(
        self,
        icon_set: IconSetProvider,
        surface: PresentationSurface,
        presenter: PresenterProtocol,
        sink: InsertionSink,
        control_factory: ControlFactory,
        grid: CatalogGrid,
        hints: InsertionHints | None = None,
        dispatcher: SelectionDispatcher | None = None,
        on_state_changed: Callable[["SessionState"], None] | None = None,
    ):
        self.icon_set = icon_set
        self.surface = surface
        self.presenter = presenter
        self.sink = sink
        self.control_factory = control_factory
        self.grid = grid
        self.hints = hints or InsertionHints()
        self.dispatcher = dispatcher
        self._on_state_changed = on_state_changed

        self.state = SessionState.WAITING
        self.error: Exception | None = None
        self.catalog: IconCatalog | None = None
        self.options: OptionsController | None = None
        self.renderer: CatalogRenderer | None = None

        self.barrier = StartupBarrier(
            [self.UI_SIGNAL, self.HOST_SIGNAL, self.CATALOG_SIGNAL],
            on_ready=self._start,
            on_failed=self._abort,
        )

    def ui_ready(self) -> None:
        self.barrier.signal_ready(self.UI_SIGNAL)

    def host_ready(self) -> None:
        self.barrier.signal_ready(self.HOST_SIGNAL)

    def host_failed(self, error: Exception) -> None:
        self.barrier.signal_failed(self.HOST_SIGNAL, error)

    def catalog_loaded(self, catalog: IconCatalog) -> None:
        self.catalog = catalog
        self.barrier.signal_ready(self.CATALOG_SIGNAL)

    def catalog_failed(self, error: Exception) -> None:
        self.barrier.signal_failed(self.CATALOG_SIGNAL, error)

    def load_catalog(self) -> None:
        """Load the catalog in the calling thread and report it to the barrier."""
        try:
            catalog = self.icon_set.load_catalog()
        except CatalogLoadError as e:
            self.catalog_failed(e)
            return
        self.catalog_loaded(catalog)

    def _start(self) -> None:
        assert self.catalog is not None

        self.icon_set.initialize_presentation(self.surface)

        self.options = OptionsController(self.icon_set, self.surface, self.presenter)
        self.options.build(self.control_factory)
        self.options.options_changed()

        self.renderer = CatalogRenderer(
            self.icon_set,
            self.catalog,
            self.options,
            self.sink,
            self.presenter,
            hints=self.hints,
            dispatcher=self.dispatcher,
        )
        count = self.renderer.render(self.grid)

        logger.info(f"Icon pane ready: {count} icons in {len(self.catalog)} categories")
        self._set_state(SessionState.READY)

    def _abort(self, name: str, error: Exception) -> None:
        self.error = error
        self.presenter.show_error(f"Could not start the icon pane ({name}): {error}")
        self._set_state(SessionState.FAILED)

    def _set_state(self, state: SessionState) -> None:
        self.state = state
        if self._on_state_changed:
            self._on_state_changed(state)
