"""
Abstract keyboard interface for Terminal Snake.

Hosts translate their native key codes into the closed Key set below.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import List, Set


class Key(Enum):
    """Named keys understood by the games."""
    W = "w"
    A = "a"
    S = "s"
    D = "d"
    Q = "q"
    R = "r"
    ESC = "esc"
    UNKNOWN = "unknown"


class KeyEventKind(Enum):
    PRESSED = "pressed"
    RELEASED = "released"


@dataclass(frozen=True)
class KeyEvent:
    """A discrete key transition observed since the previous frame."""
    kind: KeyEventKind
    key: Key

    @classmethod
    def pressed(cls, key: Key) -> "KeyEvent":
        return cls(KeyEventKind.PRESSED, key)

    @classmethod
    def released(cls, key: Key) -> "KeyEvent":
        return cls(KeyEventKind.RELEASED, key)


class KeyboardInterface(ABC):
    """
    Keyboard state as seen by a single frame.
    """

    @abstractmethod
    def last_key_events(self) -> List[KeyEvent]:
        """
        Key events received since the previous frame.

        Returns:
            Events in the order they were received
        """
        pass

    @abstractmethod
    def get_keys_down(self) -> Set[Key]:
        """
        Keys currently held down.

        Returns:
            Set of held keys
        """
        pass
