"""Heads-up display showing health as text and bar, and the level number."""

from __future__ import annotations

from .scene import Item, Rect, Scene, TextItem

BAR_X = 10
BAR_Y = 50
BAR_HEIGHT = 20
BAR_PIXELS_PER_POINT = 2


class _Bar(Item):
    def __init__(self, x: float, y: float, width: float, height: float, color: str) -> None:
        super().__init__(x, y, width, height, tag="healthbar")
        self.color = color


class Display(Item):
    """Health and level read-out placed in a scene."""

    def __init__(self, initial_health: int, level: int, scene: Scene) -> None:
        super().__init__(0, 0, 220, 80, tag="display")
        self.health = initial_health
        self.level = level
        self.scene_ref = scene

        self.health_text = TextItem(self._health_label(), color="red")
        self.health_text.set_pos(10, 10)
        scene.add_item(self.health_text)

        self.level_text = TextItem(self._level_label(), color="white")
        self.level_text.set_pos(10, 30)
        scene.add_item(self.level_text)

        self.health_bar = _Bar(BAR_X, BAR_Y, 200, BAR_HEIGHT, "green")
        scene.add_item(self.health_bar)

    def _health_label(self) -> str:
        return f"Health: {self.health}%"

    def _level_label(self) -> str:
        return f"Level: {self.level}"

    def update_health(self, new_health: int) -> None:
        self.health = new_health
        self.update_display()

    def update_level(self, new_level: int) -> None:
        self.level = new_level
        self.update_display()

    def update_display(self) -> None:
        """Refresh the texts and size the bar to the health."""
        self.health_text.text = self._health_label()
        self.health_bar.set_pos(BAR_X, BAR_Y)
        self.health_bar.width = self.health * BAR_PIXELS_PER_POINT
        self.health_bar.height = BAR_HEIGHT
        self.level_text.text = self._level_label()

    def bounding_rect(self) -> Rect:
        return Rect(0, 0, 220, 80)