"""Discovery of image files in a directory."""

import os

IMAGE_EXTENSIONS = frozenset({"png", "jpg", "jpeg"})


def _extension(filename: str) -> str:
    dot = filename.rfind(".")
    if dot <= 0:
        return ""
    return filename[dot + 1:]


def is_image_name(filename: str) -> bool:
    """Return True for a visible file name with a png, jpg or jpeg extension."""
    if filename.startswith("."):
        return False
    return _extension(filename).lower() in IMAGE_EXTENSIONS


def _sort_key(path: str) -> bytes:
    return path.encode("utf-8", "surrogateescape")


def load_image_paths(dir_path: str) -> list[str]:
    """Return the sorted paths of the image files directly inside ``dir_path``.

    Raises ValueError for an empty path and OSError when the directory
    cannot be read.
    """
    if not dir_path:
        raise ValueError("directory path is empty")
    base = dir_path if dir_path.endswith("/") else dir_path + "/"
    with os.scandir(base) as entries:
        paths = [
            base + entry.name
            for entry in entries
            if not entry.is_dir() and is_image_name(entry.name)
        ]
    return sorted(paths, key=_sort_key)