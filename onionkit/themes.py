"""Theme discovery, preview lookup, skin image installation and titles."""

import os
import shutil
from typing import Optional

THEMES_DIR = "/mnt/SDCARD/Themes"
SYSTEM_SKIN_DIR = "/mnt/SDCARD/miyoo/app/skin"
NO_PREVIEW_IMAGE = "res/noThemePreview.png"
NUMBER_OF_THEMES = 100
STR_MAX = 256

_LIST_TITLE_MAX = STR_MAX + 11
_DETAIL_TITLE_MAX = STR_MAX * 2 + 3


def discover_themes(themes_dir: str = THEMES_DIR,
                    installed_name: str = "") -> tuple[list[str], int]:
    """Names of the theme directories holding a config.json, sorted by name.

    Returns the names and the index of ``installed_name`` among them, or 0
    when it is not found. At most 100 themes are listed. Raises OSError
    when the themes directory cannot be read.
    """
    with os.scandir(themes_dir) as entries:
        names = sorted(
            entry.name
            for entry in entries
            if entry.is_dir()
            and os.path.exists(os.path.join(themes_dir, entry.name, "config.json"))
        )
    names = names[:NUMBER_OF_THEMES]
    installed_index = names.index(installed_name) if installed_name in names else 0
    return names, installed_index


def preview_path(themes_dir: str, name: str, fallback: str = NO_PREVIEW_IMAGE) -> str:
    """The theme's preview.png if it exists, else ``fallback``."""
    path = os.path.join(themes_dir, name, "preview.png")
    return path if os.path.exists(path) else fallback


def _copy(source: str, target: str) -> bool:
    if not os.path.isfile(source):
        return False
    shutil.copyfile(source, target)
    return True


def install_faulty_image(theme_path: str, image_name: str, overrides_dir: str,
                         skin_dir: str = SYSTEM_SKIN_DIR) -> Optional[str]:
    """Put the skin image ``image_name`` of a theme in place of the system one.

    The system image is backed up once. An image in the overrides
    directory wins over the theme's own; with neither, the system image is
    restored from its backup and the backup removed. Returns the path the
    image was copied from, or None if nothing could be copied.
    """
    override_image = os.path.join(overrides_dir, "skin", f"{image_name}.png")
    theme_image = os.path.join(theme_path, "skin", f"{image_name}.png")
    system_image = os.path.join(skin_dir, f"{image_name}.png")
    system_backup = os.path.join(skin_dir, f"{image_name}_back.png")

    if not os.path.exists(system_backup):
        _copy(system_image, system_backup)

    if os.path.exists(override_image):
        return override_image if _copy(override_image, system_image) else None
    if os.path.exists(theme_image):
        return theme_image if _copy(theme_image, system_image) else None

    restored = _copy(system_backup, system_image)
    if os.path.lexists(system_backup):
        os.remove(system_backup)
    return system_backup if restored else None


def list_title(name: str, installed: bool) -> str:
    """Title of a theme in the list, marked when it is the installed one."""
    title = f"{name} - Installed" if installed else name
    return title[:_LIST_TITLE_MAX]


def detail_title(name: str, author: str) -> str:
    """Title of a theme on its detail page, with the author when known."""
    title = f"{name} by {author}" if author else name
    return title[:_DETAIL_TITLE_MAX]