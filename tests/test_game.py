from desertrun.droplet import WaterDroplet
from desertrun.game import Game
from desertrun.player import Key
from desertrun.scene import Item, TextItem


class _FixedChoice:
    def randrange(self, stop):
        return 0


def _game():
    return Game(rng=_FixedChoice())


def _texts(game):
    return [item.text for item in game.scene.items() if isinstance(item, TextItem)]


def test_new_game_state():
    game = _game()
    assert game.score == 0
    assert game.game_over is False
    assert game.running is False
    assert game.health_label == "Health: 100"
    assert game.level_label == "Level: 1"


def test_start_game_sets_up_level():
    game = _game()
    game.start_game()
    assert game.running is True
    assert game.player in game.scene
    assert any(item.tag == "platform" for item in game.scene.items())


def test_pause_and_resume():
    game = _game()
    game.start_game()
    game.pause_game()
    assert game.running is False
    assert "PAUSED" in _texts(game)
    game.resume_game()
    assert game.running is True
    assert "PAUSED" not in _texts(game)


def test_p_key_toggles_pause():
    game = _game()
    game.start_game()
    game.key_press(Key.P)
    assert game.running is False
    game.key_press(Key.P)
    assert game.running is True
    assert "PAUSED" not in _texts(game)


def test_advance_level_adds_score():
    game = _game()
    game.start_game()
    game.advance_level()
    assert game.score == 1000
    assert game.current_level.level_number == 2
    assert game.level_label == "Level: 2"


def test_n_key_advances():
    game = _game()
    game.start_game()
    game.key_press(Key.N)
    assert game.current_level.level_number == 2


def test_restart_resets_score_and_level():
    game = _game()
    game.start_game()
    game.advance_level()
    game.key_press(Key.R)
    assert game.score == 0
    assert game.current_level.level_number == 1
    assert game.running is True
    assert game.level_label == "Level: 1"


def test_zero_health_ends_game():
    game = _game()
    game.start_game()
    game.player.take_damage(200)
    game.check_collisions()
    assert game.game_over is True
    assert game.running is False
    texts = _texts(game)
    assert "GAME OVER" in texts
    assert "Score: 0" in texts
    assert "Press R to restart" in texts


def test_game_over_ignores_other_keys_until_restart():
    game = _game()
    game.start_game()
    game.player.take_damage(200)
    game.check_collisions()
    game.key_press(Key.N)
    assert game.current_level.level_number == 1
    game.key_press(Key.R)
    assert game.game_over is False
    assert "GAME OVER" not in _texts(game)


def test_collision_pushes_player_out_sideways():
    game = _game()
    player = game.player
    start_x = player.x
    block = Item(player.x + player.width - 10, player.y, 50, player.height)
    game.scene.add_item(block)
    game.check_collisions()
    assert player.x < start_x
    assert not player.scene_bounding_rect().intersects(block.scene_bounding_rect())


def test_update_collects_touched_droplet():
    game = _game()
    droplet = WaterDroplet(game.player.x + 10, game.player.y + 10)
    game.scene.add_item(droplet)
    game.update()
    assert game.player.droplets_collected == 1
    assert droplet not in game.scene


def test_other_keys_go_to_player():
    game = _game()
    game.start_game()
    game.key_press(Key.RIGHT)
    assert game.player.moving_right is True
    game.key_release(Key.RIGHT)
    assert game.player.moving_right is False


def test_update_ui_reflects_health():
    game = _game()
    game.player.take_damage(30)
    game.update_ui()
    assert game.health_label == f"Health: {game.player.health}"