import pytest

from asadvision.health import Health
from asadvision.menus import (
    LOADING_SCREEN,
    MAX_VOLUME,
    MIN_VOLUME,
    STORY_SCREEN,
    TITLE_SCREEN,
    MenuNavigator,
    Navigation,
    credits_lines,
    lower_global_volume,
    main_menu_lines,
    raise_global_volume,
    results_lines,
    volume_label,
)
from asadvision.states import GAME_NAME, Menu


@pytest.mark.parametrize(
    "all_loaded, screen", [(True, STORY_SCREEN), (False, LOADING_SCREEN)]
)
def test_start_picks_story_or_loading(all_loaded, screen):
    nav = MenuNavigator(Menu.MAIN)
    result = nav.start(all_loaded)
    assert result == Navigation(screen=screen)
    assert nav.menu is Menu.MAIN


def test_open_settings_and_credits():
    nav = MenuNavigator(Menu.MAIN)
    assert nav.open_settings().menu is Menu.SETTINGS
    assert nav.menu is Menu.SETTINGS
    assert nav.open_credits().menu is Menu.CREDITS
    assert nav.menu is Menu.CREDITS


def test_back_from_credits_returns_to_title_main():
    nav = MenuNavigator(Menu.CREDITS)
    assert nav.back(on_title=False) == Navigation(screen=TITLE_SCREEN, menu=Menu.MAIN)
    assert nav.menu is Menu.MAIN


@pytest.mark.parametrize("on_title, menu", [(True, Menu.MAIN), (False, Menu.PAUSE)])
def test_back_from_settings_depends_on_screen(on_title, menu):
    nav = MenuNavigator(Menu.SETTINGS)
    assert nav.back(on_title) == Navigation(menu=menu)
    assert nav.menu is menu


def test_back_from_pause_closes_menu():
    nav = MenuNavigator(Menu.PAUSE)
    assert nav.back(on_title=False) == Navigation(menu=Menu.NONE)
    assert nav.menu is Menu.NONE


def test_back_from_results_opens_credits():
    nav = MenuNavigator(Menu.RESULTS)
    assert nav.back(on_title=False).menu is Menu.CREDITS
    assert nav.menu is Menu.CREDITS


def test_back_from_main_does_nothing():
    nav = MenuNavigator(Menu.MAIN)
    assert nav.back(on_title=True) == Navigation()
    assert nav.menu is Menu.MAIN


def test_close_quit_and_exit():
    nav = MenuNavigator(Menu.PAUSE)
    assert nav.close() == Navigation(menu=Menu.NONE)
    assert nav.menu is Menu.NONE
    assert nav.quit_to_title() == Navigation(screen=TITLE_SCREEN)
    assert nav.exit_app().exit is True


def test_volume_steps_round_trip():
    assert lower_global_volume(raise_global_volume(1.0)) == pytest.approx(1.0)
    assert raise_global_volume(1.0) > 1.0
    assert lower_global_volume(1.0) < 1.0


def test_volume_clamped():
    assert lower_global_volume(0.05) == MIN_VOLUME
    assert lower_global_volume(MIN_VOLUME) == MIN_VOLUME
    assert raise_global_volume(2.95) == MAX_VOLUME
    assert raise_global_volume(MAX_VOLUME) == MAX_VOLUME


def test_volume_never_leaves_range_after_many_steps():
    volume = 1.0
    for _ in range(50):
        volume = raise_global_volume(volume)
    assert volume == MAX_VOLUME
    for _ in range(50):
        volume = lower_global_volume(volume)
    assert volume == MIN_VOLUME


def test_volume_label():
    assert volume_label(1.0) == "100%"
    assert volume_label(0.5) == " 50%"
    assert volume_label(0.0).strip() == "0%"
    assert len(volume_label(0.0)) == 4


def test_results_lines_show_score():
    lines = results_lines(Health(100.0, 37.5))
    assert lines[0] == "Congratulations!"
    assert lines[2] == "37.5"
    assert lines[-1] == "Thank you for playing!"


def test_results_score_of_whole_number_has_no_fraction():
    assert results_lines(Health(100.0))[2] == "100"


def test_credits_lines():
    lines = credits_lines()
    assert lines[0] == "Brought to you by"
    assert "Fonts: Allura, Crimson" in lines
    assert "We would love your feedback!" in lines


def test_main_menu_lines():
    lines = main_menu_lines()
    assert lines[0] == GAME_NAME
    assert lines[1:] == ["Start", "Settings", "Credits", "Exit"]