"""Materializes an icon catalog as a grid and dispatches selections."""

import logging
from collections.abc import Callable
from typing import Protocol

from icon_pane.exceptions import RenderFetchError
from icon_pane.interfaces import IconButtonLike, IconSetProvider, InsertionSink, PresenterProtocol
from icon_pane.models import (
    IconCatalog,
    IconIdentity,
    InsertionHints,
    RenderedIcon,
    SelectionRequest,
)
from icon_pane.orchestration.options_controller import OptionsController

logger = logging.getLogger(__name__)

SelectionDispatcher = Callable[[SelectionRequest], None]


class CatalogGrid(Protocol):
    """Toolkit-side container for the catalog's groups and controls."""

    def add_group(self, category: str) -> object:
        """Create a labeled group for a category and return a handle to it."""
        ...

    def add_button(self, group: object, identity: IconIdentity) -> IconButtonLike:
        """Create a selectable control in a group.

        The control must carry ``identity`` in its ``icon_identity`` attribute.
        """
        ...


class CatalogRenderer:
    """Builds the icon grid and turns clicks into render-and-insert requests.

    Selections are handed to a dispatcher. The default dispatcher processes
    them inline; the GUI substitutes one that fetches on a worker thread and
    calls deliver() or report_failure() back on the UI thread. Concurrent
    selections are neither queued nor de-duplicated.
    """

    def __init__(
        self,
        icon_set: IconSetProvider,
        catalog: IconCatalog,
        options: OptionsController,
        sink: InsertionSink,
        presenter: PresenterProtocol,
        hints: InsertionHints | None = None,
        dispatcher: SelectionDispatcher | None = None,
    ):
        self.icon_set = icon_set
        self.catalog = catalog
        self.options = options
        self.sink = sink
        self.presenter = presenter
        self.hints = hints or InsertionHints()
        self.dispatcher: SelectionDispatcher = dispatcher or self.process

    def render(self, grid: CatalogGrid) -> int:
        """Create one group per category and one control per icon, in catalog order.

        Args:
            grid: Toolkit grid to populate

        Returns:
            Number of controls created
        """
        count = 0
        for category in self.catalog:
            group = grid.add_group(category.name)
            for entry in category:
                button = grid.add_button(group, IconIdentity(category.name, entry.name))
                button.setToolTip(entry.name)
                self.icon_set.render_icon_button(category.name, entry.name, entry.ref, button)
                count += 1
        return count

    def resolve(self, target: object) -> SelectionRequest | None:
        """Resolve a clicked object to a selection request.

        Returns:
            The request, or None if the target is not an icon control
        """
        identity = getattr(target, "icon_identity", None)
        if not isinstance(identity, IconIdentity):
            return None

        try:
            entry = self.catalog.lookup(identity.category, identity.name)
        except KeyError:
            logger.warning(f"Clicked control is not in the catalog: {identity}")
            return None

        return SelectionRequest(identity=identity, ref=entry.ref, values=self.options.current_values())

    def handle_click(self, target: object) -> None:
        """Dispatch a click inside the grid. Clicks on anything but an icon control are no-ops."""
        request = self.resolve(target)
        if request is not None:
            self.dispatcher(request)

    def fetch(self, request: SelectionRequest) -> RenderedIcon:
        """Render the requested icon.

        Raises:
            RenderFetchError: If the icon cannot be retrieved or transformed
        """
        return self.icon_set.fetch_rendered_icon(request.identity.name, request.ref, request.values)

    def deliver(self, request: SelectionRequest, icon: RenderedIcon) -> None:
        """Hand a rendered icon to the insertion sink with the fixed placement hints."""
        logger.info(f"Inserting {icon}")
        self.sink.insert(icon, self.hints)

    def report_failure(self, request: SelectionRequest, error: Exception) -> None:
        """Surface a failed render. Nothing is inserted and the grid stays usable."""
        logger.warning(f"Could not render {request.identity}: {error}")
        self.presenter.show_error(f"Could not insert '{request.identity.name}': {error}")

    def process(self, request: SelectionRequest) -> RenderedIcon | None:
        """Fetch and deliver a selection in the calling thread.

        Returns:
            The inserted icon, or None if rendering failed
        """
        try:
            icon = self.fetch(request)
        except RenderFetchError as e:
            self.report_failure(request, e)
            return None

        self.deliver(request, icon)
        return icon
