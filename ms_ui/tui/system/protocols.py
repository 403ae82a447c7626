from typing import Protocol

from ms_core.selection import Presentation


class UI(Protocol):
    presentation: Presentation


__all__ = ["Presentation", "UI"]
