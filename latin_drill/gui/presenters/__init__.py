"""Presenter implementations for GUI."""

from .gui_presenter import GUIPresenter
from .gui_session_listener import GUISessionListener

__all__ = ["GUIPresenter", "GUISessionListener"]
