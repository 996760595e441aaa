"""Presenter implementations for output abstraction."""

from .null_presenter import NullPresenter

__all__ = ["NullPresenter"]
