"""Obstacles on the platforms: fire and cactus hurt, quicksand restarts the level."""

from __future__ import annotations

from enum import Enum, auto
from typing import Any

from .player import Player
from .scene import Item

OBSTACLE_SIZE = 50
MOVE_LEFT_LIMIT = 100
MOVE_RIGHT_LIMIT = 600


class ObstacleType(Enum):
    PLATFORM = auto()
    HAZARD = auto()
    MOVING = auto()


class Obstacle(Item):
    """A fixed-size scene item that may move and react to the player touching it."""

    image = ""

    def __init__(
        self,
        x: float,
        y: float,
        obstacle_type: ObstacleType,
        damage: int = 0,
        movable: bool = False,
    ) -> None:
        super().__init__(x, y, OBSTACLE_SIZE, OBSTACLE_SIZE, tag="obstacle")
        self.obstacle_type = obstacle_type
        self.damage = damage
        self.movable = movable
        self.speed = 0

    def move(self) -> None:
        """Step sideways, turning round past the movement limits."""
        if self.movable:
            self.set_pos(self.x + self.speed, self.y)
            if self.x < MOVE_LEFT_LIMIT or self.x > MOVE_RIGHT_LIMIT:
                self.speed = -self.speed

    def touches(self, player: Player) -> bool:
        return any(item is player for item in self.colliding_items())

    def handle_collision(self, player: Player) -> None:
        """React to the player; plain obstacles do nothing."""


class Fire(Obstacle):
    image = "Obstacles/firepit.png"

    def __init__(self, x: float, y: float) -> None:
        super().__init__(x, y, ObstacleType.HAZARD, 10)

    def handle_collision(self, player: Player) -> None:
        if self.touches(player):
            player.take_damage(10)


class Cactus(Obstacle):
    image = "Obstacles/cactus.png"

    def __init__(self, x: float, y: float) -> None:
        super().__init__(x, y, ObstacleType.HAZARD, 20)

    def handle_collision(self, player: Player) -> None:
        if self.touches(player):
            player.take_damage(20)


class Quicksand(Obstacle):
    """Touching it restarts the level it belongs to."""

    image = "Obstacles/quicksand.png"

    def __init__(self, x: float, y: float, level: Any = None) -> None:
        super().__init__(x, y, ObstacleType.HAZARD, 0)
        self.level = level

    def handle_collision(self, player: Player) -> None:
        if self.touches(player):
            if self.level is None:
                raise RuntimeError("quicksand has no level to reset")
            self.level.reset_level()