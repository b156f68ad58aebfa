"""Menu transitions, the volume setting and the text shown on menu pages."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from asadvision.health import Health
from asadvision.states import GAME_NAME, Menu

TITLE_SCREEN = "title"
LOADING_SCREEN = "loading"
STORY_SCREEN = "story"

MIN_VOLUME = 0.0
MAX_VOLUME = 3.0
VOLUME_STEP = 0.1

MAIN_MENU_BUTTONS = ("Start", "Settings", "Credits", "Exit")
PAUSE_MENU_BUTTONS = ("Continue", "Settings", "Quit to title")
PAUSE_HEADER = "Game paused"


@dataclass(frozen=True)
class Navigation:
    """The state changes a menu action asks for; ``None`` leaves a state alone."""

    screen: str | None = None
    menu: Menu | None = None
    exit: bool = False


class MenuNavigator:
    """Tracks the open menu and works out where each action leads."""

    def __init__(self, menu: Menu = Menu.NONE) -> None:
        self.menu = menu

    def _go(self, navigation: Navigation) -> Navigation:
        if navigation.menu is not None:
            self.menu = navigation.menu
        return navigation

    def start(self, all_loaded: bool) -> Navigation:
        """Start the game: straight to the story if every asset is ready."""
        return self._go(Navigation(screen=STORY_SCREEN if all_loaded else LOADING_SCREEN))

    def open_settings(self) -> Navigation:
        """Open the settings menu."""
        return self._go(Navigation(menu=Menu.SETTINGS))

    def open_credits(self) -> Navigation:
        """Open the credits menu."""
        return self._go(Navigation(menu=Menu.CREDITS))

    def back(self, on_title: bool) -> Navigation:
        """Leave the current menu, as the Back button or Escape does."""
        if self.menu is Menu.CREDITS:
            return self._go(Navigation(screen=TITLE_SCREEN, menu=Menu.MAIN))
        if self.menu is Menu.SETTINGS:
            return self._go(Navigation(menu=Menu.MAIN if on_title else Menu.PAUSE))
        if self.menu is Menu.PAUSE:
            return self._go(Navigation(menu=Menu.NONE))
        if self.menu is Menu.RESULTS:
            return self._go(Navigation(menu=Menu.CREDITS))
        return Navigation()

    def close(self) -> Navigation:
        """Close the open menu and carry on playing."""
        return self._go(Navigation(menu=Menu.NONE))

    def quit_to_title(self) -> Navigation:
        """Abandon the game and return to the title screen."""
        return self._go(Navigation(screen=TITLE_SCREEN))

    def exit_app(self) -> Navigation:
        """Quit the application."""
        return self._go(Navigation(exit=True))


def lower_global_volume(volume: float) -> float:
    """The volume one step quieter, never below the minimum."""
    return max(volume - VOLUME_STEP, MIN_VOLUME)


def raise_global_volume(volume: float) -> float:
    """The volume one step louder, never above the maximum."""
    return min(volume + VOLUME_STEP, MAX_VOLUME)


def volume_label(volume: float) -> str:
    """The volume as a whole percentage, right-aligned to three places."""
    return f"{100.0 * volume:3.0f}%"


def _format_score(value: float) -> str:
    if value != value:
        return "NaN"
    if value in (float("inf"), float("-inf")):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


def results_lines(player_health: Health) -> list[str]:
    """The lines of the results page; the score is the health left over."""
    return [
        "Congratulations!",
        "Your final score is: (the higher the better)",
        _format_score(player_health.current),
        "Thank you for playing!",
    ]


def main_menu_lines() -> list[str]:
    """The title and buttons of the main menu."""
    return [GAME_NAME, *MAIN_MENU_BUTTONS]


def credits_lines() -> list[str]:
    """The lines of the credits page."""
    return [
        "Brought to you by",
        "Tifereth (Programming, all nighter puller), 4321louis (Programming, people skills user)",
        "Cassie (Chief Animator, Chief Artist), Varshna (Chief Artist, Chief Background Designer)",
        "acid (Story, Ancestor, Vision haver), Hethan (Music, not a Bevy enjoyer)",
        "External assets used:",
        "Fonts: Allura, Crimson",
        "We would love your feedback!",
        "As always, positive feedback goes to giro308 (he didn't even participate in this jam)",
        "Negative feedback goes to 4321louis (he did nothing wrong this jam)",
    ]