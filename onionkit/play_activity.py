"""Play time tracking: the binary play activity database, timers and rankings."""

import os
import re
import shutil
import struct
import sys
import time
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

MAX_RECORDS = 1000
MAX_BACKUP_FILES = 80
NAME_SIZE = 100
PAGE_SIZE = 4
MIN_RANKED_SECONDS = 60

INIT_TIMER_PATH = "/tmp/initTimer"
PLAY_ACTIVITY_DB_PATH = "/mnt/SDCARD/Saves/CurrentProfile/saves/playActivity.db"
PLAY_ACTIVITY_BACKUP_DIR = "/mnt/SDCARD/Saves/CurrentProfile/saves/PlayActivityBackup"
TOTAL_TIME_PATH = "currentTotalTime"

DB_FULL_TEXT = "DB:FU"

_RECORD = struct.Struct("<100si")
DB_SIZE = _RECORD.size * MAX_RECORDS


class DatabaseFullError(Exception):
    """Raised when a new game cannot be added because the database is full."""


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def _remove_extension(name: str) -> str:
    dot = name.rfind(".")
    if dot <= 0 or "/" in name[dot:]:
        return name
    return name[:dot]


def _sync() -> None:
    if hasattr(os, "sync"):
        os.sync()


@dataclass
class RomRecord:
    """Total play time in seconds of one game."""

    name: str
    play_time: int = 0


class PlayActivityDB:
    """The fixed-size table of games and their play time."""

    def __init__(self, records: Iterable[RomRecord] = ()):
        self.records = list(records)

    def __len__(self) -> int:
        return len(self.records)

    @classmethod
    def from_bytes(cls, data: bytes) -> "PlayActivityDB":
        """Decode a database image; missing bytes read as empty slots."""
        data = bytes(data[:DB_SIZE]).ljust(DB_SIZE, b"\0")
        records = []
        for raw_name, play_time in _RECORD.iter_unpack(data):
            name = raw_name.split(b"\0", 1)[0].decode("utf-8", "surrogateescape")
            records.append(RomRecord(name, play_time))
        used = max((i + 1 for i, rec in enumerate(records) if rec.name), default=0)
        return cls(records[:used])

    def to_bytes(self) -> bytes:
        """Encode all slots of the database, empty ones as zeros."""
        chunks = []
        for record in self.records[:MAX_RECORDS]:
            name = record.name.encode("utf-8", "surrogateescape")[: NAME_SIZE - 1]
            chunks.append(_RECORD.pack(name, record.play_time))
        return b"".join(chunks).ljust(DB_SIZE, b"\0")

    @classmethod
    def load(cls, path: str) -> "PlayActivityDB":
        """Read the database at ``path``; a missing file gives an empty one."""
        if not os.path.exists(path):
            return cls()
        with open(path, "rb") as handle:
            return cls.from_bytes(handle.read())

    def save(self, path: str) -> None:
        """Write the database to ``path``; an empty database is not written."""
        if not self.records:
            return
        if os.path.exists(path):
            os.remove(path)
        with open(path, "wb") as handle:
            handle.write(self.to_bytes())
        _sync()

    def search(self, rom_name: str) -> Optional[int]:
        """Index of the game named ``rom_name`` with or without extension."""
        for index, record in enumerate(self.records):
            if record.name == rom_name or _remove_extension(record.name) == rom_name:
                return index
        return None

    def add_time(self, rom_name: str, seconds: int) -> int:
        """Add ``seconds`` to a game, creating it if needed; return its total."""
        index = self.search(rom_name)
        if index is not None:
            self.records[index].play_time += seconds
            return self.records[index].play_time
        if len(self.records) >= MAX_RECORDS - 1:
            raise DatabaseFullError(rom_name)
        self.records.append(RomRecord(rom_name, seconds))
        return seconds


def format_play_time(seconds: int) -> str:
    """Format seconds as hours and zero-padded minutes."""
    hours = int(seconds / 3600)
    minutes = int((seconds - 3600 * hours) / 60)
    return f"{hours}:{minutes:02d}"


def _backup_name(backup_dir: str, slot: int) -> str:
    return os.path.join(backup_dir, f"playActivityBackup{slot:02d}.db")


def backup_db(db_path: str = PLAY_ACTIVITY_DB_PATH,
              backup_dir: str = PLAY_ACTIVITY_BACKUP_DIR) -> str:
    """Copy the database into the next free backup slot; return the slot path."""
    os.makedirs(backup_dir, mode=0o700, exist_ok=True)
    free = next(
        (i for i in range(MAX_BACKUP_FILES) if not os.path.isfile(_backup_name(backup_dir, i))),
        None,
    )
    if free is None:
        target, following = _backup_name(backup_dir, 0), _backup_name(backup_dir, 1)
    else:
        target, following = _backup_name(backup_dir, free), _backup_name(backup_dir, free + 1)
    for path in (target, following):
        if os.path.lexists(path):
            os.remove(path)
    if os.path.isfile(db_path):
        shutil.copyfile(db_path, target)
    return target


def start_timer(timer_path: str = INIT_TIMER_PATH, now: Optional[float] = None) -> int:
    """Record the start of a session; return the stored epoch time."""
    epoch = int(time.time() if now is None else now)
    if os.path.exists(timer_path):
        os.remove(timer_path)
    with open(timer_path, "w") as handle:
        handle.write(str(epoch))
    _sync()
    return epoch


def end_timer(game_name: str,
              timer_path: str = INIT_TIMER_PATH,
              db_path: str = PLAY_ACTIVITY_DB_PATH,
              backup_dir: str = PLAY_ACTIVITY_BACKUP_DIR,
              total_time_path: str = TOTAL_TIME_PATH,
              now: Optional[float] = None) -> Optional[tuple[int, str]]:
    """Close the running session for ``game_name`` and store its play time.

    Returns the session length and the total time text, or None when no
    session was started.
    """
    try:
        with open(timer_path, "rb") as handle:
            base_time = _atoi(handle.read().decode("ascii", "replace"))
    except FileNotFoundError:
        return None

    end_time = int(time.time() if now is None else now)
    session = end_time - base_time

    db = PlayActivityDB.load(db_path)
    try:
        total_text = format_play_time(db.add_time(game_name, session))
    except DatabaseFullError:
        total_text = DB_FULL_TEXT

    if os.path.exists(total_time_path):
        os.remove(total_time_path)
    with open(total_time_path, "w") as handle:
        handle.write(total_text)
    _sync()

    backup_db(db_path, backup_dir)
    db.save(db_path)
    os.remove(timer_path)
    return session, total_text


def game_name_from_path(path: str) -> str:
    """Game name from a rom path: base name without quote or extension."""
    base = os.path.basename(path.rstrip("/")) or path[:1]
    base = base[: NAME_SIZE - 1]
    if base.endswith('"'):
        base = base[:-1]
    return _remove_extension(base)


def ranking(records: Iterable[RomRecord]) -> list[RomRecord]:
    """Games played at least a minute, longest first."""
    ordered = sorted((r for r in records if r.name), key=lambda r: -r.play_time)
    result = []
    for record in ordered:
        if record.play_time < MIN_RANKED_SECONDS:
            break
        result.append(record)
    return result


def total_mileage(records: Iterable[RomRecord]) -> str:
    """Formatted sum of the play time of ``records``."""
    return format_play_time(sum(r.play_time for r in records))


def page_count(count: int) -> int:
    """Number of pages needed to list ``count`` games; never less than one."""
    return int((count - 1) / PAGE_SIZE) + 1


def page_entries(records: Sequence[RomRecord], page: int) -> list[tuple[int, str, str]]:
    """Position, time text and name of the rows shown on ``page``."""
    entries = []
    for slot in range(PAGE_SIZE):
        index = page * PAGE_SIZE + slot
        if 0 <= index < len(records) and records[index].name:
            record = records[index]
            entries.append((index + 1, format_play_time(record.play_time), record.name))
        else:
            entries.append((index + 1, "", ""))
    return entries


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start a timer with ``init`` or end it for the rom path given."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 1
    if args[0] == "init":
        epoch = start_timer()
        print(f"Timer initiated: {epoch}")
        return 0
    game_name = game_name_from_path(args[0])
    result = end_timer(game_name)
    if result is not None:
        session, total_text = result
        print(f"Timer ended ({game_name}): session = {session}, total = {total_text}")
    return 0