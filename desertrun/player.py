"""The player character: movement, jumping, health and collected droplets."""

from __future__ import annotations

import logging
from enum import Enum, auto

from .scene import Item

log = logging.getLogger(__name__)

MAX_HEALTH = 100
STEP = 25
RIGHT_LIMIT = 600
LEFT_LIMIT = 100
JUMP_VELOCITY = 15
JUMP_INTERVAL_MS = 20
FALL_LIMIT = 1000
PLAYER_WIDTH = 150
PLAYER_HEIGHT = 200


class Key(Enum):
    """Keys the game reacts to."""

    RIGHT = auto()
    LEFT = auto()
    UP = auto()
    DOWN = auto()
    SPACE = auto()
    A = auto()
    P = auto()
    N = auto()
    R = auto()


class Pose(Enum):
    """The picture shown for the player, valued by its image resource."""

    STANDING = "Character/playerstanding.png"
    RUNNING_RIGHT = "Character/runningright.png"
    RUNNING_LEFT = "Character/runningleft.png"
    CROUCH = "Character/playercrouch.png"
    ATTACK = "Character/playersword.png"


class Player(Item):
    """The character the user steers."""

    def __init__(self, width: float = PLAYER_WIDTH, height: float = PLAYER_HEIGHT) -> None:
        super().__init__(100, 400, width, height, tag="player")
        self.health = MAX_HEALTH
        self.coins = 0
        self.jumping = False
        self.crouching = False
        self.attacking = False
        self.moving_right = False
        self.moving_left = False
        self.velocity_y = 0
        self.ground_y = self.y
        self.droplets_collected = 0
        self.pose = Pose.STANDING

    def move_forward(self) -> None:
        self.moving_right = True
        self.pose = Pose.RUNNING_RIGHT
        if self.x < RIGHT_LIMIT:
            self.set_pos(self.x + STEP, self.y)

    def move_backward(self) -> None:
        self.moving_left = True
        self.pose = Pose.RUNNING_LEFT
        if self.x > LEFT_LIMIT:
            self.set_pos(self.x - STEP, self.y)

    def jump(self) -> None:
        """Start a jump unless one is already under way."""
        if not self.jumping:
            self.jumping = True
            self.velocity_y = JUMP_VELOCITY

    def crouch(self) -> None:
        self.crouching = True
        self.pose = Pose.CROUCH

    def attack(self) -> None:
        self.attacking = True
        self.pose = Pose.ATTACK

    def set_position(self, x: float, y: float) -> None:
        """Place the player and make that height the new ground."""
        self.set_pos(x, y)
        self.ground_y = y

    def take_damage(self, damage: int) -> None:
        self.health = max(self.health - damage, 0)

    def heal(self, health_points: int) -> None:
        self.health = min(self.health + health_points, MAX_HEALTH)

    def key_press(self, key: Key) -> None:
        if key is Key.RIGHT:
            self.move_forward()
        elif key is Key.LEFT:
            self.move_backward()
        elif key in (Key.SPACE, Key.UP):
            self.jump()
        elif key is Key.DOWN:
            self.crouch()
        elif key is Key.A:
            self.attack()

    def key_release(self, key: Key) -> None:
        if key in (Key.DOWN, Key.A, Key.LEFT, Key.RIGHT):
            self.crouching = False
            self.attacking = False
            self.moving_right = False
            self.moving_left = False
            self.pose = Pose.STANDING

    def increment_droplets(self) -> None:
        self.droplets_collected += 1

    def _land(self, y: float) -> None:
        self.y = y
        self.jumping = False
        self.velocity_y = 0
        self.pose = Pose.STANDING

    def tick_jump(self) -> None:
        """Advance a jump by one step; call every JUMP_INTERVAL_MS while jumping."""
        if not self.jumping:
            return
        self.set_pos(self.x, self.y - self.velocity_y)
        self.velocity_y -= 1
        log.debug("Player Y: %s velocityY: %s", self.y, self.velocity_y)

        height = self.bounding_rect().height
        for item in self.colliding_items():
            if item.tag == "platform" and self.velocity_y < 0 and self.y + height >= item.y:
                self._land(item.y - height)
                log.debug("landed on platform")
                return

        if self.velocity_y < 0 and self.y >= self.ground_y:
            self._land(self.ground_y)
            log.debug("landed on ground")

        if self.y > FALL_LIMIT:
            self._land(self.ground_y)
            log.debug("fell and reset to ground")