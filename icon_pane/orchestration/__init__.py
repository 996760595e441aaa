"""Orchestration of icon sets, option controls and the catalog grid."""

from .catalog_renderer import CatalogGrid, CatalogRenderer, SelectionDispatcher
from .icon_pane_session import IconPaneSession, SessionState
from .options_controller import ControlFactory, OptionControl, OptionsController
from .startup_barrier import StartupBarrier

__all__ = [
    "CatalogGrid",
    "CatalogRenderer",
    "SelectionDispatcher",
    "ControlFactory",
    "OptionControl",
    "OptionsController",
    "IconPaneSession",
    "SessionState",
    "StartupBarrier",
]
