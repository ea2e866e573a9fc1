"""The desert adventure window: scrolling backdrop, level, health bar and droplet count."""

from __future__ import annotations

import argparse
import random
from typing import Any

from .droplet import WaterDroplet
from .level import DROPLET_COUNT, Level
from .obstacles import Cactus, Fire, Quicksand
from .player import JUMP_INTERVAL_MS, Key, Player, Pose
from .scene import SCENE_HEIGHT, SCENE_WIDTH, Item, Scene

TITLE = "Desert Adventure Game"
WINDOW_WIDTH = SCENE_WIDTH
WINDOW_HEIGHT = SCENE_HEIGHT
SCROLL_SPEED = 5
FRAME_INTERVAL_MS = 16
HEALTH_BAR_WIDTH = 200
HEALTH_BAR_HEIGHT = 20
HEALTH_BAR_MARGIN = 10
HEALTH_BAR_OFFSET = 230
START_POSITION = (100, 400)
BACKGROUND_IMAGE = "backgrounds/desertbackground.jpg"


class MainWindow:
    """Holds the scene and advances it one frame at a time."""

    def __init__(self, rng: Any = None) -> None:
        self.title = TITLE
        self.width = WINDOW_WIDTH
        self.height = WINDOW_HEIGHT
        self.scene = Scene(WINDOW_WIDTH, WINDOW_HEIGHT)

        self.bg1 = Item(0, 0, WINDOW_WIDTH, WINDOW_HEIGHT, tag="background", z=-1)
        self.bg2 = Item(WINDOW_WIDTH, 0, WINDOW_WIDTH, WINDOW_HEIGHT, tag="background", z=-1)
        self.scene.add_item(self.bg1)
        self.scene.add_item(self.bg2)

        self.player = Player()
        self.scene.add_item(self.player)
        self.player.set_position(*START_POSITION)

        self.level = Level(1, self.scene, self.player, rng=rng)
        self.level.setup_level()

        self.health_outline = Item(0, 0, HEALTH_BAR_WIDTH, HEALTH_BAR_HEIGHT, tag="healthoutline")
        self.scene.add_item(self.health_outline)
        self.health_bar = Item(0, 0, HEALTH_BAR_WIDTH, HEALTH_BAR_HEIGHT, tag="healthbar")
        self.scene.add_item(self.health_bar)

        self.level_text = "Level: 1"
        self.score_text = f"0/{DROPLET_COUNT}"

    def update_health_bar(self) -> None:
        """Shrink the bar to the player's health."""
        self.health_bar.width = 2 * self.player.health
        self.health_bar.height = HEALTH_BAR_HEIGHT

    def update_score(self) -> None:
        self.score_text = f"{self.player.droplets_collected}/{DROPLET_COUNT}"

    def _scrolled_items(self) -> list[Item]:
        fixed = (self.player, self.bg1, self.bg2)
        return [
            item
            for item in self.scene.items()
            if not any(item is other for other in fixed)
        ]

    def _scroll_left(self) -> None:
        for bg in (self.bg1, self.bg2):
            bg.move_by(-SCROLL_SPEED, 0)
        if self.bg1.x + WINDOW_WIDTH <= 0:
            self.bg1.x = self.bg2.x + WINDOW_WIDTH
        if self.bg2.x + WINDOW_WIDTH <= 0:
            self.bg2.x = self.bg1.x + WINDOW_WIDTH

        for item in self._scrolled_items():
            if item.x + item.bounding_rect().width < 0:
                item.x = self.scene.scene_rect.width
            item.move_by(-SCROLL_SPEED, 0)

    def _scroll_right(self) -> None:
        for bg in (self.bg1, self.bg2):
            bg.move_by(SCROLL_SPEED, 0)
        if self.bg1.x >= WINDOW_WIDTH:
            self.bg1.x = self.bg2.x - WINDOW_WIDTH
        if self.bg2.x >= WINDOW_WIDTH:
            self.bg2.x = self.bg1.x - WINDOW_WIDTH

        for item in self._scrolled_items():
            if item.x > self.scene.scene_rect.width:
                item.x = 0 - item.bounding_rect().width
            item.move_by(SCROLL_SPEED, 0)

    def update_game(self) -> None:
        """One frame: reset on a fall, scroll with the player, refresh the read-outs."""
        player = self.player
        if player.y > WINDOW_HEIGHT:
            self.level.reset_level()
            return

        if player.x >= 600 and player.moving_right:
            self._scroll_left()
        if player.x <= 100 and player.moving_left:
            self._scroll_right()

        bar_x = self.width - HEALTH_BAR_OFFSET
        bar_y = HEALTH_BAR_MARGIN + 30
        self.health_outline.set_pos(bar_x, bar_y)
        self.health_bar.set_pos(bar_x, bar_y)

        self.update_health_bar()
        self.update_score()

    def key_press(self, key: Key) -> None:
        self.player.key_press(key)
        if key is Key.R:
            self.level.reset_level()
        elif key is Key.N:
            self.level.next_level()

    def key_release(self, key: Key) -> None:
        self.player.key_release(key)


_POSE_COLORS = {
    Pose.STANDING: (60, 90, 160),
    Pose.RUNNING_RIGHT: (70, 110, 190),
    Pose.RUNNING_LEFT: (70, 110, 190),
    Pose.CROUCH: (40, 70, 130),
    Pose.ATTACK: (160, 60, 60),
}


def _item_color(window: MainWindow, item: Item) -> tuple[int, int, int] | None:
    if isinstance(item, Player):
        return _POSE_COLORS[item.pose]
    if isinstance(item, Fire):
        return (230, 90, 20)
    if isinstance(item, Cactus):
        return (40, 140, 50)
    if isinstance(item, Quicksand):
        return (200, 170, 110)
    if isinstance(item, WaterDroplet):
        return (60, 150, 230)
    if item.tag == "platform":
        return (140, 85, 45)
    if item.tag == "background":
        return (237, 201, 155)
    if item is window.health_bar:
        return (0, 200, 0)
    return None


def _draw(pygame: Any, screen: Any, font: Any, window: MainWindow) -> None:
    screen.fill((250, 220, 170))
    for item in reversed(window.scene.items()):
        rect = pygame.Rect(
            round(item.x), round(item.y), max(round(item.width), 0), max(round(item.height), 0)
        )
        if item is window.health_outline:
            pygame.draw.rect(screen, (0, 0, 0), rect, 1)
            continue
        color = _item_color(window, item)
        if color is None:
            continue
        if isinstance(item, WaterDroplet):
            pygame.draw.ellipse(screen, color, rect)
        else:
            pygame.draw.rect(screen, color, rect)
        if item.tag == "background":
            horizon = rect.y + rect.height * 2 // 3
            pygame.draw.line(screen, (210, 170, 120), (rect.left, horizon), (rect.right, horizon), 3)

    screen.blit(font.render(window.level_text, True, (0, 0, 0)), (600, 10))
    pygame.draw.ellipse(screen, (60, 150, 230), pygame.Rect(600, 50, 30, 30))
    screen.blit(font.render(window.score_text, True, (0, 0, 0)), (635, 55))


def _play(rng: Any = None) -> int:
    import pygame

    key_map = {
        pygame.K_RIGHT: Key.RIGHT,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_UP: Key.UP,
        pygame.K_DOWN: Key.DOWN,
        pygame.K_SPACE: Key.SPACE,
        pygame.K_a: Key.A,
        pygame.K_p: Key.P,
        pygame.K_n: Key.N,
        pygame.K_r: Key.R,
    }

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(TITLE)
        font = pygame.font.Font(None, 28)
        clock = pygame.time.Clock()
        window = MainWindow(rng=rng)

        jump_elapsed = 0
        frame_elapsed = 0
        playing = True
        while playing:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    playing = False
                elif event.type == pygame.KEYDOWN and event.key in key_map:
                    window.key_press(key_map[event.key])
                elif event.type == pygame.KEYUP and event.key in key_map:
                    window.key_release(key_map[event.key])

            elapsed = clock.tick(1000 // FRAME_INTERVAL_MS)
            jump_elapsed += elapsed
            while jump_elapsed >= JUMP_INTERVAL_MS:
                jump_elapsed -= JUMP_INTERVAL_MS
                window.player.tick_jump()

            frame_elapsed += elapsed
            while frame_elapsed >= FRAME_INTERVAL_MS:
                frame_elapsed -= FRAME_INTERVAL_MS
                window.update_game()

            _draw(pygame, screen, font, window)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0


def run() -> int:
    """Open the game window and play until it is closed."""
    return _play()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="desertrun", description=TITLE)
    parser.add_argument("--seed", type=int, default=None, help="seed for the level layout")
    args = parser.parse_args(argv)
    if args.seed is None:
        return run()
    return _play(random.Random(args.seed))