"""Installer screen logic: options, slide rotation and progress from messages."""

import re
import sys
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

STR_MAX = 256
NUM_SLIDES = 8


@dataclass
class InstallOptions:
    """Command line options of the installer screen."""

    start_at: int = 0
    total_offset: int = 100
    message: str = " "


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def parse_args(argv: Optional[Sequence[str]] = None) -> InstallOptions:
    """Parse installer arguments; unknown arguments raise ValueError."""
    args = iter(sys.argv[1:] if argv is None else argv)
    options = InstallOptions()
    for arg in args:
        if arg not in ("-b", "--begin", "-t", "--total", "-m", "--message"):
            raise ValueError(f"Unknown argument '{arg}'")
        try:
            value = next(args)
        except StopIteration:
            raise ValueError(f"option {arg} requires a value") from None
        if arg in ("-b", "--begin"):
            options.start_at = _atoi(value)
        elif arg in ("-t", "--total"):
            options.total_offset = _atoi(value)
        else:
            options.message = value[: STR_MAX - 1]
    return options


def next_slide(current: int, num_slides: int, direction: int,
               has_slide: Callable[[int], bool]) -> int:
    """Next available slide in ``direction``; -1 stands for the waiting screen."""
    index = current
    while True:
        index += direction
        if index >= num_slides:
            index = -1
        if index < -1:
            index = num_slides - 1
        if index == -1 or index == current or has_slide(index):
            return index


def last_number(text: str) -> Optional[int]:
    """The last run of digits in ``text``, or None if there is none."""
    numbers = re.findall(r"\d+", text)
    return int(numbers[-1]) if numbers else None


def progress_for(message: str, start_at: int = 0, total_offset: int = 100) -> Optional[int]:
    """Overall progress for a status message ending in a sub-install percentage."""
    if total_offset <= 0 or total_offset > 100:
        raise ValueError("total offset must be between 1 and 100")
    divisor = 100 // total_offset
    number = last_number(message)
    if number is None:
        return None
    return start_at + number // divisor