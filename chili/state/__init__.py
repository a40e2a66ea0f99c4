"""State management submodules for Chili."""

from .window import WindowState
from .view import ViewState
from .app_state import AppState

__all__ = [
    'WindowState',
    'ViewState',
    'AppState',
]
