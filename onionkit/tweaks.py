"""Labels, stored values and settings behind the tweaks menu entries."""

from typing import Mapping, Optional, Sequence

TOOLS_SHORT_NAMES = ("favsort-az", "favsort-sys", "favfix", "recents", "dot_clean")
NUM_TOOLS = len(TOOLS_SHORT_NAMES)

FONT_FAMILIES = (
    "BPreplayBold.otf",
    "Exo-2-Bold-Italic_Universal.ttf",
    "Helvetica-Neue-2.ttf",
    "HENB.TTF",
    "wqy-microhei.ttc",
)
FONT_SIZES = (13, 18, 24, 32, 40)

OFFSET_BASE = 11
BATTERY_WARN_STEP = 5

APP_PREFIX = "app:"
TOOL_PREFIX = "tool:"

TRIGGER_KEYS = (
    "input_player1_l_btn",
    "input_player1_r_btn",
    "input_player1_l2_btn",
    "input_player1_r2_btn",
)
NORMAL_TRIGGERS = (10, 11, 12, 13)
SWAPPED_TRIGGERS = (12, 13, 10, 11)

# An app is given as (directory name, display name).
App = Sequence[str]


def format_app_shortcut(value: int, apps: Sequence[App]) -> str:
    """Label of a shortcut choice: off, an installed app or a tool."""
    if value <= 0 or value > len(apps) + NUM_TOOLS:
        return "Off"
    index = value - 1
    if index < len(apps):
        return f"App: {apps[index][1]}"
    return f"Tool: {TOOLS_SHORT_NAMES[index - len(apps)]}"


def format_battery_warning(value: int) -> str:
    """Label of the low battery warning level."""
    if value == 0:
        return "Off"
    return f"< {value * BATTERY_WARN_STEP}%"


def _choice(options: Sequence, value: int, what: str):
    if not 1 <= value <= len(options):
        raise ValueError(f"{what} choice {value} is out of range")
    return options[value - 1]


def format_font_family(value: int) -> str:
    """Label of a font family choice; 0 keeps the theme's font."""
    if value == 0:
        return "-"
    return _choice(FONT_FAMILIES, value, "font family")


def format_font_size(value: int) -> str:
    """Label of a font size choice; 0 keeps the theme's size."""
    if value == 0:
        return "-"
    return f"{_choice(FONT_SIZES, value, 'font size')} px"


def format_fast_forward(value: int) -> str:
    """Label of the fast forward rate."""
    if value == 0:
        return "Unlimited"
    return f"{value}.0x"


def format_position_offset(value: int) -> str:
    """Label of a position offset choice; 0 keeps the theme's offset."""
    if value == 0:
        return "-"
    return f"{value - OFFSET_BASE} px"


def format_time_skip(value: int) -> str:
    """Label of the emulated time skip in hours."""
    if value == 0:
        return "Off"
    return f"+ {value}h"


def app_shortcut_value(saved: str, apps: Sequence[App]) -> int:
    """Menu value of a stored shortcut setting such as "app:Name" or "tool:favfix"."""
    if saved.startswith(APP_PREFIX):
        name = saved[len(APP_PREFIX):]
        for index, app in enumerate(apps):
            if app[0] == name:
                return 1 + index
    elif saved.startswith(TOOL_PREFIX):
        name = saved[len(TOOL_PREFIX):]
        if name in TOOLS_SHORT_NAMES:
            return 1 + len(apps) + TOOLS_SHORT_NAMES.index(name)
    return 0


def app_shortcut_setting(value: int, apps: Sequence[App]) -> str:
    """Stored setting for a shortcut menu value; "" means no shortcut."""
    if value <= 0:
        return ""
    index = value - 1
    if index < len(apps):
        return APP_PREFIX + apps[index][0]
    index -= len(apps)
    if index < NUM_TOOLS:
        return TOOL_PREFIX + TOOLS_SHORT_NAMES[index]
    return ""


def font_family_value(override: Optional[str]) -> int:
    """Menu value for a font path override; 0 when unset or unknown."""
    if override is None:
        return 0
    for index, family in enumerate(FONT_FAMILIES):
        if override.endswith(family):
            return index + 1
    return 0


def font_size_value(override: Optional[int]) -> int:
    """Menu value for a font size override; 0 when unset or not offered."""
    if override is None or override not in FONT_SIZES:
        return 0
    return FONT_SIZES.index(override) + 1


def offset_value(override: Optional[int]) -> int:
    """Menu value for a position offset override; 0 when unset."""
    if override is None:
        return 0
    return override + OFFSET_BASE


def offset_from_value(value: int, theme_value: int) -> int:
    """Offset applied for a menu value; 0 falls back to the theme's offset."""
    if value == 0:
        return theme_value
    return value - OFFSET_BASE


def toggle_value(override: Optional[bool]) -> int:
    """Menu value of a theme toggle: 0 unset, 1 off, 2 on."""
    if override is None:
        return 0
    return 2 if override else 1


def position_value(override: Optional[bool]) -> int:
    """Menu value of the battery position: 0 unset, 1 left, 2 right."""
    if override is None:
        return 0
    return 1 if override else 2


def swap_triggers_value(buttons: Mapping[str, Optional[int]]) -> int:
    """1 when the trigger buttons are not in their normal order, else 0."""
    current = tuple(buttons.get(key) for key in TRIGGER_KEYS)
    return 0 if current == NORMAL_TRIGGERS else 1


def trigger_buttons(swap: bool) -> dict[str, int]:
    """Button numbers for each trigger setting, normal or swapped."""
    values = SWAPPED_TRIGGERS if swap else NORMAL_TRIGGERS
    return dict(zip(TRIGGER_KEYS, values))


def frame_throttle_line(value: int) -> str:
    """Configuration line setting the fast forward ratio."""
    return f'fastforward_ratio = "{value}.000000"'