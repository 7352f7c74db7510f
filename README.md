# onionkit

Helpers for a handheld game launcher. You can use them as a library, and two
of them also run from the command line.

- **Play activity** (`onionkit.play_activity`): a fixed-size binary database
  of play time per ROM (`PlayActivityDB`, `RomRecord`). Also session timers
  (`start_timer`, `end_timer`), rotating backups (`backup_db`), and the
  ranking and paging helpers (`ranking`, `total_mileage`, `page_count`,
  `page_entries`, `format_play_time`).
- **Images and slideshows** (`onionkit.images`, `onionkit.slideshow`):
  - `load_image_paths` lists the png/jpg/jpeg files in a directory, sorted.
  - `load_images_from_json` reads slides from a JSON file that holds an
    `images` array.
  - `ImageCache` keeps the previous, current and next images loaded.
  - `Slideshow` holds the navigation rules, the header title and the button
    hints.
  - `parse_args` reads the viewer options (`-t/--title`, `-m/--message`,
    `-i/--image`, `-j/--images-json`, `-d/--directory`,
    `-s/--show-theme-controls`, `-a/--auto`).
- **Key events** (`onionkit.sendkeys`): turns code/value pairs into
  `KeyEvent`s, encodes them as raw input events and writes them to an input
  device.
- **Install screen** (`onionkit.install_slides`):
  - `parse_args` reads the installer options `-b/--begin`, `-t/--total` and
    `-m/--message`.
  - `next_slide` rotates through the slides.
  - `last_number` and `progress_for` read a progress value out of a status
    message.
- **Themes** (`onionkit.themes`): `discover_themes` lists the theme
  directories that hold a `config.json`. `preview_path` finds a theme's
  preview image. `install_faulty_image` copies a theme's skin image, or an
  override of it, over the system one. `list_title` and `detail_title` build
  the titles shown for a theme.
- **Tweaks** (`onionkit.tweaks`): maps the settings menu values to their
  labels and to stored settings and back. This covers app and tool shortcuts,
  battery percentage font, size, position and offsets, label toggles, trigger
  swapping and the fast forward ratio line.

## Installation

```
pip install .
```

The package has no runtime dependencies. To install and run the test suite:

```
pip install .[test]
pytest
```

## Command line

### play-activity

Start a play session timer. This writes the current epoch time to
`/tmp/initTimer`:

```
play-activity init
```

End the session for a ROM:

```
play-activity "/mnt/SDCARD/Roms/GB/Some Game.gb"
```

- The game name is the path's file name, without a trailing quote and
  without its extension.
- The session length is added to the game's total in
  `/mnt/SDCARD/Saves/CurrentProfile/saves/playActivity.db`.
- The total is written as `H:MM` to `currentTotalTime` in the working
  directory. If the database is full, `DB:FU` is written instead.
- Before the database is saved, a copy goes into the next free slot of the
  `PlayActivityBackup` directory next to it.
- If no timer was started, nothing is recorded.
- Running the command with no argument exits with status 1.

### sendkeys

Write key events to `/dev/input/event0` as code/value pairs
(0 released, 1 pressed, 2 repeating):

```
sendkeys 1 1 1 0
```

If the arguments are missing or odd in number, the command prints its usage
and exits with status 1. At most 100 events can be sent at once.

## Library examples

```python
from onionkit.play_activity import PlayActivityDB, format_play_time, ranking

db = PlayActivityDB.load("playActivity.db")   # a missing file gives an empty database
db.add_time("Some Game", 3725)
for record in ranking(db.records):            # games played at least a minute, longest first
    print(record.name, format_play_time(record.play_time))
db.save("playActivity.db")
```

```python
from onionkit.images import load_image_paths
from onionkit.slideshow import Key, Slide, Slideshow

slides = [Slide(path) for path in load_image_paths("/mnt/SDCARD/Media/Images")]
show = Slideshow(slides)
show.press(Key.RIGHT)
print(show.header_title(), show.button_hints())
```

```python
from onionkit.tweaks import format_time_skip, trigger_buttons

print(format_time_skip(3))   # "+ 3h"
print(trigger_buttons(True))
```

## What it does not do

- The package draws nothing. The viewer, installer, activity, theme and
  tweaks screens are not here; you get only their state and rules.
- There is no package selection or installation of packages.
- There is no handling of key events coming from a device: no ignore queue
  for events you injected yourself, and no button monitoring.
- Settings and theme configuration files are not read or written. The tweaks
  and themes helpers take and return plain values.