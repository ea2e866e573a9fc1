"""A small 2D scene graph: rectangles, positioned items and the scene holding them."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import count
from typing import Any, Iterator

SCENE_WIDTH = 800
SCENE_HEIGHT = 600


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float
    y: float
    width: float
    height: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def translated(self, dx: float, dy: float) -> Rect:
        return Rect(self.x + dx, self.y + dy, self.width, self.height)

    def intersects(self, other: Rect) -> bool:
        """True when the two rectangles share an area; touching edges do not count."""
        if self.is_empty or other.is_empty:
            return False
        return (
            self.left < other.right
            and other.left < self.right
            and self.top < other.bottom
            and other.top < self.bottom
        )


_insertion_order = count()


class Item:
    """Something placed in a scene at a position, with a size and an optional tag."""

    def __init__(
        self,
        x: float = 0,
        y: float = 0,
        width: float = 0,
        height: float = 0,
        *,
        tag: Any = None,
        z: float = 0,
    ) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.tag = tag
        self.z = z
        self.scene: Scene | None = None
        self._order = next(_insertion_order)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(x={self.x}, y={self.y}, tag={self.tag!r})"

    def set_pos(self, x: float, y: float) -> None:
        self.x = x
        self.y = y

    def move_by(self, dx: float, dy: float) -> None:
        self.x += dx
        self.y += dy

    def bounding_rect(self) -> Rect:
        """The item's area in its own coordinates."""
        return Rect(0, 0, self.width, self.height)

    def scene_bounding_rect(self) -> Rect:
        """The item's area in scene coordinates."""
        return self.bounding_rect().translated(self.x, self.y)

    def colliding_items(self) -> list[Item]:
        """Other items of the same scene whose areas overlap this one."""
        if self.scene is None:
            return []
        own = self.scene_bounding_rect()
        return [
            item
            for item in self.scene.items()
            if item is not self and own.intersects(item.scene_bounding_rect())
        ]


class TextItem(Item):
    """A line of text; its size follows from the text and the font size."""

    def __init__(
        self,
        text: str = "",
        *,
        color: str = "black",
        point_size: int = 9,
        tag: Any = None,
    ) -> None:
        super().__init__(tag=tag)
        self.text = text
        self.color = color
        self.point_size = point_size

    def bounding_rect(self) -> Rect:
        return Rect(0, 0, 0.6 * self.point_size * len(self.text), 1.5 * self.point_size)


class Scene:
    """Holds items and answers which ones exist, topmost first."""

    def __init__(self, width: float = SCENE_WIDTH, height: float = SCENE_HEIGHT) -> None:
        self.scene_rect = Rect(0, 0, width, height)
        self._items: list[Item] = []

    def __contains__(self, item: object) -> bool:
        return any(existing is item for existing in self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items())

    def add_item(self, item: Item) -> None:
        if item.scene is self:
            return
        if item.scene is not None:
            item.scene.remove_item(item)
        item.scene = self
        item._order = next(_insertion_order)
        self._items.append(item)

    def remove_item(self, item: Item) -> None:
        if item not in self:
            raise ValueError(f"{item!r} is not in this scene")
        self._items = [existing for existing in self._items if existing is not item]
        item.scene = None

    def items(self) -> list[Item]:
        """All items in descending stacking order: highest z, then latest added, first."""
        return sorted(self._items, key=lambda item: (-item.z, -item._order))

    def clear(self) -> None:
        for item in self._items:
            item.scene = None
        self._items = []

    def add_text(self, text: str) -> TextItem:
        item = TextItem(text)
        self.add_item(item)
        return item