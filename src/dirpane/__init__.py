"""Public interface for the dirpane browser."""

__version__ = "0.1.0"

from .browser import DirPaneBrowser, DirPaneBrowserError
from .cursor import ListCursor
from .panes import DirectoryPane, FilePane
from .session import BrowserSession, Focus, NavCommand

__all__ = [
    "BrowserSession",
    "DirPaneBrowser",
    "DirPaneBrowserError",
    "DirectoryPane",
    "FilePane",
    "Focus",
    "ListCursor",
    "NavCommand",
    "__version__",
]
