"""Slideshow and info panel state: options, image list, cache and navigation."""

import enum
import json
import sys
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence

STR_MAX = 256
TITLE_MAX = 50

LABEL_NEXT = "Next"
LABEL_BACK = "Back"
LABEL_OK = "OK"
LABEL_EXIT = "Exit"


@dataclass(frozen=True)
class Slide:
    """One image to show, with an optional header title."""

    path: str
    title: Optional[str] = None


class Key(enum.Enum):
    """Buttons the slideshow reacts to."""

    A = enum.auto()
    B = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    MENU = enum.auto()
    Y = enum.auto()


@dataclass
class Options:
    """Command line options of the viewer."""

    title: str = ""
    message: str = ""
    image: str = ""
    images_json: str = ""
    directory: str = ""
    show_theme_controls: bool = False
    wait_confirm: bool = True


_VALUE_FLAGS = {
    "-t": "title",
    "--title": "title",
    "-m": "message",
    "--message": "message",
    "-i": "image",
    "--image": "image",
    "-j": "images_json",
    "--images-json": "images_json",
    "-d": "directory",
    "--directory": "directory",
}


def parse_args(argv: Optional[Sequence[str]] = None) -> Options:
    """Parse viewer arguments; unknown arguments are ignored."""
    args = iter(sys.argv[1:] if argv is None else argv)
    options = Options()
    for arg in args:
        if not arg.startswith("-"):
            continue
        field = _VALUE_FLAGS.get(arg)
        if field is not None:
            try:
                value = next(args)
            except StopIteration:
                raise ValueError(f"option {arg} requires a value") from None
            setattr(options, field, value[: STR_MAX - 1])
        elif arg in ("-s", "--show-theme-controls"):
            options.show_theme_controls = True
        elif arg in ("-a", "--auto"):
            options.wait_confirm = False
    return options


def load_images_from_json(config_path: str) -> list[Slide]:
    """Read slides from a JSON file holding an ``images`` array.

    Items without a string ``path`` are skipped. Raises OSError when the
    file cannot be read and ValueError when it is not valid JSON.
    """
    with open(config_path, encoding="utf-8") as handle:
        data = json.load(handle)
    images = data.get("images") if isinstance(data, dict) else None
    if not isinstance(images, list):
        return []
    slides = []
    for item in images:
        if not isinstance(item, dict):
            continue
        path = item.get("path")
        if not isinstance(path, str):
            continue
        title = item.get("title")
        slides.append(
            Slide(
                path[: STR_MAX - 1],
                title[: TITLE_MAX - 1] if isinstance(title, str) else None,
            )
        )
    return slides


def filename_of(path: str) -> str:
    """Return the part after the last slash, or "" if there is none past the start."""
    slash = path.rfind("/")
    if slash <= 0:
        return ""
    return path[slash + 1:]


class ImageCache:
    """Keeps the previous, current and next image loaded around a position."""

    def __init__(self, loader: Callable[[str], Any]):
        self._loader = loader
        self.prev: Any = None
        self.current: Any = None
        self.next: Any = None
        self.cache_used = False

    def show(self, new_index: int, current_index: int, paths: Sequence[str]) -> Optional[str]:
        """Move to ``new_index`` from ``current_index``.

        Returns the path of the image now current, or None when the index is
        out of range or more than one step away. ``self.current`` then holds
        the loaded image and ``self.cache_used`` tells whether it came from
        the cache.
        """
        count = len(paths)
        if not 0 <= new_index < count:
            return None
        path = paths[new_index]
        last = count - 1

        if new_index == current_index and self.current is None:
            self.prev = None if new_index == 0 else self._loader(paths[new_index - 1])
            self.current = self._loader(path)
            self.next = None if new_index == last else self._loader(paths[new_index + 1])
            self.cache_used = False
            return path

        step = new_index - current_index
        if abs(step) > 1:
            return None

        if step > 0:
            self.prev = self.current
            self.current = self.next
            self.next = None if new_index == last else self._loader(paths[new_index + 1])
        elif step < 0:
            self.next = self.current
            self.current = self.prev
            self.prev = None if new_index == 0 else self._loader(paths[new_index - 1])
        self.cache_used = True
        return path

    def clear(self) -> None:
        """Drop every cached image."""
        self.prev = None
        self.current = None
        self.next = None


class Slideshow:
    """Navigation state of the viewer in slideshow or info panel mode."""

    def __init__(self, slides: Sequence[Slide], info_panel: bool = False):
        self.slides = list(slides)
        self.info_panel = info_panel
        self.index = 0 if self.slides else -1
        self.show_theme_controls = info_panel
        self.quit = False

    def press(self, key: Key) -> bool:
        """Handle a key press; return True when the screen must be redrawn."""
        if key is Key.MENU:
            self.quit = True
            return False
        if key is Key.Y:
            self.show_theme_controls = not self.show_theme_controls
            return True
        if key in (Key.A, Key.RIGHT):
            forward = True
        elif key in (Key.B, Key.LEFT):
            forward = False
        else:
            return False

        last = len(self.slides) - 1
        if (
            (forward and key is Key.RIGHT and self.index == last)
            or (not forward and key is Key.LEFT and self.index == 0)
            or (self.info_panel and key in (Key.RIGHT, Key.LEFT))
        ):
            return False
        if (
            self.info_panel
            or (forward and self.index == last)
            or (not forward and self.index == 0)
        ):
            self.quit = True
            return False
        self.index += 1 if forward else -1
        return True

    def header_title(self) -> Optional[str]:
        """Title shown in the header for the current slide."""
        if self.info_panel or not 0 <= self.index < len(self.slides):
            return None
        slide = self.slides[self.index]
        if slide.title is not None:
            return slide.title
        return filename_of(slide.path)

    def button_hints(self) -> tuple[str, Optional[str]]:
        """Labels for the A and B buttons in the footer."""
        count = len(self.slides)
        if self.info_panel or count == 1:
            return LABEL_OK, None
        if self.index == count - 1:
            return LABEL_EXIT, LABEL_BACK
        if self.index == 0:
            return LABEL_NEXT, LABEL_EXIT
        return LABEL_NEXT, LABEL_BACK