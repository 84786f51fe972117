from abc import ABC, abstractmethod
from typing import Optional


class Shape(ABC):
    """
    Something that can draw itself, erase itself and be repositioned.

    show/hide are independent rasterization passes: a Shape keeps no
    "currently drawn" state, so hide() only restores the screen if nothing
    else overwrote the region after show().
    """

    @abstractmethod
    def show(self, duration: Optional[float] = None):
        ...

    @abstractmethod
    def hide(self):
        ...

    @abstractmethod
    def move_to(self, x: int, y: int):
        ...
