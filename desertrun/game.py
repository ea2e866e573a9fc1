"""The game loop: scene, player, level, score, pausing and game over."""

from __future__ import annotations

from typing import Any

from .droplet import WaterDroplet
from .level import Level
from .player import Key, Player
from .scene import Item, Scene

FRAME_INTERVAL_MS = 16
LEVEL_BONUS = 1000
PAUSE_TAG = "pauseText"


class Game:
    """Owns the scene and drives one frame of play per update."""

    def __init__(self, rng: Any = None) -> None:
        self.scene = Scene()
        self.player = Player()
        self.rng = rng
        self.current_level = Level(1, self.scene, self.player, rng=rng)
        self.running = False
        self.score = 0
        self.game_over = False
        self.health_label = "Health: 100"
        self.level_label = "Level: 1"

    def start_game(self) -> None:
        self.current_level.setup_level()
        self.running = True
        self.update_ui()

    def pause_game(self) -> None:
        self.running = False
        text = self.scene.add_text("PAUSED")
        text.set_pos(350, 250)
        text.color = "black"
        text.point_size = 150
        text.tag = PAUSE_TAG

    def resume_game(self) -> None:
        for item in self.scene.items():
            if item.tag == PAUSE_TAG:
                self.scene.remove_item(item)
                break
        self.running = True

    def restart_game(self) -> None:
        self.score = 0
        self.game_over = False
        self.current_level = Level(1, self.scene, self.player, rng=self.rng)
        self.scene.clear()
        self.start_game()

    def _add_text(self, text: str, x: float, y: float, color: str, size: int) -> None:
        item = self.scene.add_text(text)
        item.set_pos(x, y)
        item.color = color
        item.point_size = size

    def game_over_screen(self) -> None:
        self.running = False
        self.game_over = True
        self._add_text("GAME OVER", 300, 200, "red", 36)
        self._add_text(f"Score: {self.score}", 340, 250, "white", 24)
        self._add_text("Press R to restart", 320, 300, "white", 18)

    def update_ui(self) -> None:
        self.health_label = f"Health: {self.player.health}"
        self.level_label = f"Level: {self.current_level.level_number}"

    def _push_out(self, player_rect: Any, item: Item) -> None:
        item_rect = item.scene_bounding_rect()
        overlap_x = min(player_rect.right, item_rect.right) - max(player_rect.left, item_rect.left)
        overlap_y = min(player_rect.bottom, item_rect.bottom) - max(player_rect.top, item_rect.top)
        player = self.player
        if overlap_x < overlap_y:
            shift = -overlap_x if player.x < item.x else overlap_x
            player.set_pos(player.x + shift, player.y)
        else:
            shift = -overlap_y if player.y < item.y else overlap_y
            player.set_pos(player.x, player.y + shift)

    def check_collisions(self) -> None:
        """Push the player out of anything it overlaps, then check for death."""
        player_rect = self.player.scene_bounding_rect()
        for item in self.scene.items():
            if item is self.player:
                continue
            if player_rect.intersects(item.scene_bounding_rect()):
                self._push_out(player_rect, item)

        self.update_ui()
        if self.player.health <= 0 and not self.game_over:
            self.game_over_screen()

    def advance_level(self) -> None:
        self.score += LEVEL_BONUS
        self.current_level.next_level()
        self.update_ui()

    def key_press(self, key: Key) -> None:
        if self.game_over:
            if key is Key.R:
                self.restart_game()
            return

        if key is Key.P:
            if self.running:
                self.pause_game()
            else:
                self.resume_game()
        elif key is Key.N:
            self.advance_level()
        elif key is Key.R:
            self.restart_game()
        else:
            self.player.key_press(key)

    def key_release(self, key: Key) -> None:
        self.player.key_release(key)

    def update(self) -> None:
        """One frame: resolve collisions, collect droplets, refresh the labels."""
        self.check_collisions()
        for item in self.scene.items():
            if isinstance(item, WaterDroplet) and item.scene is self.scene:
                item.check_collision(self.player)
        self.update_ui()