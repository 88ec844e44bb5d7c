"""Text UI layer for exabind."""

from .app import ExabindTuiApp
from .controller import BoundShortcut, BrowserSnapshot, KeymapBrowser

__all__ = ["BoundShortcut", "BrowserSnapshot", "ExabindTuiApp", "KeymapBrowser"]
