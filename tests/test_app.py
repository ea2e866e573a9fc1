import random

import pytest

from desertrun.app import SCROLL_SPEED, TITLE, MainWindow, main
from desertrun.player import MAX_HEALTH, STEP, Key


@pytest.fixture
def window():
    return MainWindow(rng=random.Random(7))


def _platforms(window):
    return [item for item in window.scene.items() if item.tag == "platform"]


def test_initial_read_outs(window):
    assert window.title == "Desert Adventure Game"
    assert window.title == TITLE
    assert window.level_text == "Level: 1"
    assert window.score_text == "0/20"


def test_level_is_laid_out_with_player_in_scene(window):
    assert len(_platforms(window)) == 6
    assert window.player in window.scene
    assert window.player.x == 50


def test_update_score_counts_droplets(window):
    window.player.increment_droplets()
    window.player.increment_droplets()
    window.update_score()
    assert window.score_text == "2/20"


def test_health_bar_follows_health(window):
    window.update_health_bar()
    full = window.health_bar.width
    window.player.take_damage(50)
    window.update_health_bar()
    assert window.health_bar.width == full / 2
    assert window.health_bar.height == window.health_outline.height


def test_update_game_places_health_bar(window):
    window.update_game()
    assert (window.health_bar.x, window.health_bar.y) == (570, 40)
    assert (window.health_outline.x, window.health_outline.y) == (
        window.health_bar.x,
        window.health_bar.y,
    )


def test_fall_resets_level(window):
    window.player.take_damage(40)
    window.player.set_pos(300, 700)
    window.update_game()
    assert window.player.x == 50
    assert window.player.y <= 600
    assert window.player.health == MAX_HEALTH


def test_no_scroll_without_movement(window):
    window.player.set_pos(600, window.player.y)
    before = [p.x for p in _platforms(window)]
    window.update_game()
    assert [p.x for p in _platforms(window)] == before
    assert window.bg1.x == 0


def test_scrolls_left_when_pushing_right_edge(window):
    window.player.set_pos(600, window.player.y)
    window.player.moving_right = True
    before = sorted(p.x for p in _platforms(window))
    window.update_game()
    after = sorted(p.x for p in _platforms(window))
    assert after == [x - SCROLL_SPEED for x in before]
    assert window.bg1.x == -SCROLL_SPEED
    assert window.player.x == 600


def test_scrolls_right_when_pushing_left_edge(window):
    window.player.set_pos(100, window.player.y)
    window.player.moving_left = True
    before = sorted(p.x for p in _platforms(window))
    window.update_game()
    after = sorted(p.x for p in _platforms(window))
    assert after == [x + SCROLL_SPEED for x in before]
    assert window.bg1.x == SCROLL_SPEED


def test_background_wraps_around(window):
    window.bg1.x = -window.width + SCROLL_SPEED
    window.player.set_pos(600, window.player.y)
    window.player.moving_right = True
    window.update_game()
    assert window.bg1.x == window.bg2.x + window.width


def test_item_leaving_left_edge_reappears_right(window):
    platform = _platforms(window)[0]
    platform.x = -platform.width - 50
    window.player.set_pos(600, window.player.y)
    window.player.moving_right = True
    window.update_game()
    assert platform.x == window.scene.scene_rect.width - SCROLL_SPEED


def test_key_n_advances_level(window):
    window.key_press(Key.N)
    assert window.level.level_number == 2
    assert _platforms(window) == []


def test_key_r_restores_health(window):
    window.player.take_damage(60)
    window.key_press(Key.R)
    assert window.player.health == MAX_HEALTH
    assert window.level.level_number == 1


def test_arrow_keys_move_player_and_release_stops(window):
    start = window.player.x
    window.key_press(Key.RIGHT)
    assert window.player.x == start + STEP
    assert window.player.moving_right
    window.key_release(Key.RIGHT)
    assert not window.player.moving_right


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit) as info:
        main(["--no-such-option"])
    assert info.value.code == 2