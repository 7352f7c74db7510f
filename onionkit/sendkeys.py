"""Write key events to an input device."""

import os
import re
import struct
import sys
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

EV_KEY = 1
MAX_EVENTS = 100
DEFAULT_DEVICE = "/dev/input/event0"
USAGE = (
    "Usage: sendkeys [[CODE] [VALUE], ...]\n"
    "Values: 0 - released, 1 - pressed, 2 - repeating"
)

_EVENT = struct.Struct("<llHHi")


@dataclass(frozen=True)
class KeyEvent:
    """One input event with its type, code and value."""

    code: int
    value: int
    type: int = EV_KEY


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def parse_events(args: Sequence[str]) -> list[KeyEvent]:
    """Turn code/value argument pairs into key events."""
    if len(args) < 2 or len(args) % 2:
        raise ValueError(USAGE)
    if len(args) // 2 > MAX_EVENTS:
        raise ValueError(f"at most {MAX_EVENTS} events can be sent")
    pairs = zip(args[::2], args[1::2])
    return [KeyEvent(_atoi(code), _atoi(value)) for code, value in pairs]


def encode_event(event: KeyEvent) -> bytes:
    """Encode an event as the device expects it, with a zero timestamp."""
    return _EVENT.pack(0, 0, event.type, event.code, event.value)


def send_events(events: Iterable[KeyEvent], device: str = DEFAULT_DEVICE) -> None:
    """Write each event to ``device``, opening it afresh for every event."""
    for event in events:
        fd = os.open(device, os.O_WRONLY)
        try:
            os.write(fd, encode_event(event))
        finally:
            os.close(fd)
        if hasattr(os, "sync"):
            os.sync()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Send the events named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        events = parse_events(args)
    except ValueError as error:
        print(error)
        return 1
    send_events(events)
    return 0