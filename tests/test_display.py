from desertrun.display import Display
from desertrun.scene import Rect, Scene


def _make(health=100, level=1):
    scene = Scene()
    return scene, Display(health, level, scene)


def test_initial_texts():
    _, display = _make()
    assert display.health_text.text == "Health: 100%"
    assert display.level_text.text == "Level: 1"


def test_items_added_to_scene():
    scene, display = _make()
    assert display.health_text in scene
    assert display.level_text in scene
    assert display.health_bar in scene
    assert len(scene) == 3


def test_text_colours():
    _, display = _make()
    assert display.health_text.color == "red"
    assert display.level_text.color == "white"


def test_full_bar_width():
    _, display = _make()
    assert display.health_bar.width == 200


def test_update_health_changes_text():
    _, display = _make()
    display.update_health(42)
    assert display.health_text.text == "Health: 42%"
    assert display.health == 42


def test_bar_scales_with_health():
    _, display = _make()
    display.update_health(100)
    full = display.health_bar.width
    display.update_health(50)
    assert display.health_bar.width == full / 2
    display.update_health(0)
    assert display.health_bar.width == 0


def test_update_level_changes_text():
    _, display = _make()
    display.update_level(3)
    assert display.level_text.text == "Level: 3"
    assert display.health_text.text == "Health: 100%"


def test_bounding_rect():
    _, display = _make()
    assert display.bounding_rect() == Rect(0, 0, 220, 80)