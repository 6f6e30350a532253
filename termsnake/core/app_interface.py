"""
Abstract application loop interface for Terminal Snake.

The host owns the frame pump and calls the game's frame callback
synchronously, once per frame, until it is asked to stop.
"""

from abc import ABC, abstractmethod
from typing import Callable

from .input_interface import KeyboardInterface
from .renderer_interface import CanvasInterface
from .spatial import Point


class AppStateInterface(ABC):
    """Per-run state handed to the frame callback."""

    @property
    @abstractmethod
    def keyboard(self) -> KeyboardInterface:
        pass

    @property
    @abstractmethod
    def step(self) -> int:
        """
        Number of frames completed before the current one.

        Returns:
            Zero on the first frame
        """
        pass

    @property
    @abstractmethod
    def is_running(self) -> bool:
        pass

    @abstractmethod
    def stop(self) -> None:
        """Request the loop to end once the current frame completes."""
        pass


FrameCallback = Callable[[AppStateInterface, CanvasInterface], None]


class AppInterface(ABC):
    """
    A host that can size, poll, draw and pump frames.
    """

    @abstractmethod
    def window_size(self) -> Point:
        """
        Get the window size in character cells.

        Returns:
            Point of (columns, rows)
        """
        pass

    @abstractmethod
    def run(self, frame_callback: FrameCallback) -> None:
        """
        Run the frame loop until the callback stops it.

        Args:
            frame_callback: Called once per frame with the app state and a
                cleared canvas to draw on
        """
        pass
