"""Levels: platforms, hazards and droplets laid out in the scene around the player."""

from __future__ import annotations

import random
from typing import Protocol

from .droplet import WaterDroplet
from .obstacles import Cactus, Fire, Quicksand
from .player import MAX_HEALTH, Player
from .scene import Item, Scene

GROUND_Y = 550
PLATFORM_WIDTH = 250
PLATFORM_HEIGHT = 100
PLATFORM_SPACING_Y = 80
PLATFORM_IMAGE = "backgrounds/brownbricks.png"
DROPLET_COUNT = 20
BRICK_WIDTH = 128
BRICK_HEIGHT = 64
SCREEN_WIDTH = 800
RESET_POSITION = (50, 350)


class _Chooser(Protocol):
    def randrange(self, stop: int) -> int: ...


def _platform_positions() -> list[tuple[int, int]]:
    columns = (100, 300, 500, 200, 400, 600)
    return [
        (x, GROUND_Y - step * PLATFORM_SPACING_Y)
        for step, x in enumerate(columns, start=1)
    ]


class Level:
    """One level of the game; it owns the obstacles it places in the scene."""

    def __init__(
        self,
        number: int,
        scene: Scene,
        player: Player,
        rng: _Chooser | None = None,
    ) -> None:
        self.scene = scene
        self.player = player
        self.level_number = number
        self.obstacles: list[Item] = []
        self.enemies: list[Item] = []
        self.rng = rng if rng is not None else random.Random()

    def _clear_obstacles(self) -> None:
        for item in self.obstacles:
            if item in self.scene:
                self.scene.remove_item(item)
        self.obstacles = []

    def _add_droplets(self) -> None:
        for i in range(DROPLET_COUNT):
            self.scene.add_item(WaterDroplet(150 + i * 100, 100 + (i % 3) * 80))

    def _add_platforms(self, positions: list[tuple[int, int]]) -> None:
        for x, y in positions:
            platform = Item(x, y, PLATFORM_WIDTH, PLATFORM_HEIGHT, tag="platform")
            self.scene.add_item(platform)
            self.obstacles.append(platform)

    def _add_random_hazards(self, positions: list[tuple[int, int]]) -> None:
        for x, y in positions:
            choice = self.rng.randrange(3)
            if choice == 0:
                self.add_obstacle(Fire(x + 80, y - PLATFORM_HEIGHT // 2))
            elif choice == 1:
                self.add_obstacle(Cactus(x + 100, y - PLATFORM_HEIGHT // 2))
            else:
                self.add_obstacle(Quicksand(x - 50, y + 50, level=self))

    def setup_level(self) -> None:
        """Replace the previous obstacles with this level's layout and place the player."""
        self._clear_obstacles()
        self._add_droplets()

        if self.level_number == 1:
            positions = _platform_positions()
            self._add_platforms(positions)
            self._add_random_hazards(positions)

        self.scene.add_item(self.player)
        self.player.set_position(50, GROUND_Y - 100)

    def add_obstacle(self, obstacle: Item) -> None:
        self.obstacles.append(obstacle)
        self.scene.add_item(obstacle)

    def add_fire_obstacles(self) -> None:
        for step in (1, 2, 3):
            x = (100, 300, 500)[step - 1]
            self.add_obstacle(Fire(x, GROUND_Y - step * PLATFORM_SPACING_Y - 50))

    def add_cactus_obstacles(self) -> None:
        for step, x in ((2, 300), (3, 500)):
            self.add_obstacle(Cactus(x, GROUND_Y - step * PLATFORM_SPACING_Y - 30))

    def add_quicksand_obstacles(self) -> None:
        for step, x in ((1, 100), (2, 300), (3, 500)):
            self.add_obstacle(
                Quicksand(x, GROUND_Y - step * PLATFORM_SPACING_Y - 50, level=self)
            )

    def reset_level(self) -> None:
        """Restore the player's health and lay the level out again."""
        self.player.set_position(*RESET_POSITION)
        self.player.health = MAX_HEALTH
        self.setup_level()

    def next_level(self) -> None:
        self.level_number += 1
        self.setup_level()