"""Water droplets the player collects by touching them."""

from __future__ import annotations

from .player import Player
from .scene import Item

DROPLET_SIZE = 30


class WaterDroplet(Item):
    """A collectible that leaves the scene when the player reaches it."""

    image = "waterdroplet.tiff"

    def __init__(self, x: float, y: float) -> None:
        super().__init__(x, y, DROPLET_SIZE, DROPLET_SIZE, tag="droplet")

    def check_collision(self, player: Player) -> bool:
        """Collect the droplet if the player touches it; report whether it was collected."""
        if any(item is player for item in self.colliding_items()):
            self.scene.remove_item(self)
            player.increment_droplets()
            return True
        return False