"""
Interfaces module - adapters for the annotation core.

Provides the concrete viewport, persistence and OpenCV window adapters
that connect the core editor session to a user.
"""

from .gui_adapter import GUIAnnotationAdapter
from .persistence import FilePersistence
from .viewport import Viewport

__all__ = ['GUIAnnotationAdapter', 'FilePersistence', 'Viewport']
