"""Screens of the imaging application and the navigation stack that holds them."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from typing import Any, Iterator, List, Optional, Tuple, Union


class ConfigurationId(enum.Enum):
    """Tabs of the extra configuration screen."""

    CUSTOMIZATION = "customization"
    SETTINGS = "settings"
    ABOUT = "about"


@dataclass(frozen=True)
class SearchState:
    """Text typed into a listing's search bar."""

    search_str: str = ""


@dataclass(frozen=True)
class ImageSelectionState:
    """Position within the nested image lists, with the flasher and search text."""

    flasher: Any
    idx: Tuple[int, ...] = ()
    search_str: str = ""

    def with_search_string(self, search_str: str) -> "ImageSelectionState":
        return replace(self, search_str=search_str)

    def with_added_id(self, id: int) -> "ImageSelectionState":
        """Descend one level into the sub-list at ``id``."""
        return replace(self, idx=(*self.idx, id))

    def with_flasher(self, flasher: Any) -> "ImageSelectionState":
        return replace(self, flasher=flasher)


@dataclass(frozen=True)
class FlashingState:
    """Progress of a running flash and the board's documentation link."""

    progress: Any
    documentation: str = ""

    def update(self, progress: Any) -> "FlashingState":
        return replace(self, progress=progress)


@dataclass(frozen=True)
class Home:
    """The main screen."""


@dataclass(frozen=True)
class BoardSelection:
    search: SearchState = field(default_factory=SearchState)


@dataclass(frozen=True)
class ImageSelection:
    state: ImageSelectionState


@dataclass(frozen=True)
class DestinationSelection:
    search: SearchState = field(default_factory=SearchState)


@dataclass(frozen=True)
class ExtraConfiguration:
    page: ConfigurationId = ConfigurationId.CUSTOMIZATION


@dataclass(frozen=True)
class Flashing:
    state: FlashingState


@dataclass(frozen=True)
class FlashingConfirmation:
    """Dialog asking whether to apply customization before flashing."""


Screen = Union[
    Home,
    BoardSelection,
    ImageSelection,
    DestinationSelection,
    ExtraConfiguration,
    Flashing,
    FlashingConfirmation,
]


def is_destination_selection(screen: Screen) -> bool:
    return isinstance(screen, DestinationSelection)


class ScreenStack:
    """Stack of open screens; the last one is shown. Starts on the home screen."""

    def __init__(self) -> None:
        self._screens: List[Screen] = [Home()]

    def __len__(self) -> int:
        return len(self._screens)

    def __iter__(self) -> Iterator[Screen]:
        return iter(self._screens)

    def current(self) -> Screen:
        """The screen on top; raises LookupError when the stack is empty."""
        if not self._screens:
            raise LookupError("No screen")
        return self._screens[-1]

    def push(self, screen: Screen) -> Screen:
        """Open ``screen`` on top of the current one."""
        self._screens.append(screen)
        return screen

    def pop(self) -> Optional[Screen]:
        """Close the top screen and return it, or None if nothing is open."""
        return self._screens.pop() if self._screens else None

    def switch(self, screen: Screen) -> Screen:
        """Close every screen and show ``screen``."""
        self._screens.clear()
        return self.push(screen)

    def replace(self, screen: Screen) -> Screen:
        """Swap the top screen for ``screen``."""
        self.pop()
        return self.push(screen)

    def reset_home(self) -> None:
        """Close every screen and show the home screen."""
        self.switch(Home())

    def update_progress(self, progress: Any) -> None:
        """Update the progress shown, if the top screen is the flashing screen."""
        if self._screens and isinstance(self._screens[-1], Flashing):
            top = self._screens[-1]
            self._screens[-1] = Flashing(top.state.update(progress))