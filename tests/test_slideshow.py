import json

import pytest

from onionkit import slideshow
from onionkit.slideshow import (
    ImageCache,
    Key,
    Options,
    Slide,
    Slideshow,
    filename_of,
    load_images_from_json,
    parse_args,
)


class _Loader:
    def __init__(self):
        self.calls = []

    def __call__(self, path):
        self.calls.append(path)
        return "img:" + path


PATHS = ["p0", "p1", "p2", "p3"]


def test_parse_args_defaults():
    assert parse_args([]) == Options()


def test_parse_args_values_and_flags():
    opts = parse_args(
        ["-t", "Hello", "--message", "World", "-d", "/pics", "-s", "--auto", "stray"]
    )
    assert opts.title == "Hello"
    assert opts.message == "World"
    assert opts.directory == "/pics"
    assert opts.show_theme_controls is True
    assert opts.wait_confirm is False
    assert opts.image == ""


def test_parse_args_long_forms():
    opts = parse_args(["--image", "a.png", "--images-json", "c.json", "--unknown"])
    assert opts.image == "a.png"
    assert opts.images_json == "c.json"


def test_parse_args_truncates_long_values():
    opts = parse_args(["-t", "x" * 400])
    assert len(opts.title) == slideshow.STR_MAX - 1


def test_parse_args_missing_value_raises():
    with pytest.raises(ValueError):
        parse_args(["-m"])


def test_filename_of():
    assert filename_of("/mnt/pics/a.png") == "a.png"
    assert filename_of("a.png") == ""
    assert filename_of("/a.png") == ""


def test_load_images_from_json(tmp_path):
    config = tmp_path / "images.json"
    config.write_text(
        json.dumps(
            {
                "images": [
                    {"path": "/a.png", "title": "First"},
                    {"title": "no path"},
                    {"path": "/b.png"},
                ]
            }
        )
    )
    assert load_images_from_json(str(config)) == [
        Slide("/a.png", "First"),
        Slide("/b.png", None),
    ]


def test_load_images_from_json_without_images(tmp_path):
    config = tmp_path / "images.json"
    config.write_text("{}")
    assert load_images_from_json(str(config)) == []


def test_load_images_from_json_truncates_title(tmp_path):
    config = tmp_path / "images.json"
    config.write_text(json.dumps({"images": [{"path": "/a.png", "title": "t" * 80}]}))
    (slide,) = load_images_from_json(str(config))
    assert len(slide.title) == slideshow.TITLE_MAX - 1


def test_load_images_from_json_invalid(tmp_path):
    config = tmp_path / "images.json"
    config.write_text("{not json")
    with pytest.raises(ValueError):
        load_images_from_json(str(config))


def test_load_images_from_json_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_images_from_json(str(tmp_path / "none.json"))


def test_cache_initial_load():
    loader = _Loader()
    cache = ImageCache(loader)
    assert cache.show(0, 0, PATHS) == "p0"
    assert cache.cache_used is False
    assert cache.prev is None
    assert cache.current == "img:p0"
    assert cache.next == "img:p1"
    assert loader.calls == ["p0", "p1"]


def test_cache_forward_and_backward():
    loader = _Loader()
    cache = ImageCache(loader)
    cache.show(0, 0, PATHS)
    assert cache.show(1, 0, PATHS) == "p1"
    assert cache.cache_used is True
    assert (cache.prev, cache.current, cache.next) == ("img:p0", "img:p1", "img:p2")
    assert cache.show(0, 1, PATHS) == "p0"
    assert (cache.prev, cache.current, cache.next) == (None, "img:p0", "img:p1")


def test_cache_last_image_has_no_next():
    cache = ImageCache(_Loader())
    cache.show(2, 2, PATHS)
    cache.show(3, 2, PATHS)
    assert cache.current == "img:p3"
    assert cache.next is None


def test_cache_same_slide_uses_cache():
    loader = _Loader()
    cache = ImageCache(loader)
    cache.show(1, 1, PATHS)
    calls = list(loader.calls)
    assert cache.show(1, 1, PATHS) == "p1"
    assert cache.cache_used is True
    assert loader.calls == calls


def test_cache_rejects_jump_and_out_of_range():
    cache = ImageCache(_Loader())
    cache.show(0, 0, PATHS)
    assert cache.show(2, 0, PATHS) is None
    assert cache.show(4, 3, PATHS) is None
    assert cache.show(-1, 0, PATHS) is None
    assert cache.current == "img:p0"


def test_cache_clear():
    cache = ImageCache(_Loader())
    cache.show(1, 1, PATHS)
    cache.clear()
    assert (cache.prev, cache.current, cache.next) == (None, None, None)


def _slides(count):
    return [Slide(f"/dir/img{i}.png") for i in range(count)]


def test_slideshow_navigation_forward_and_exit():
    show = Slideshow(_slides(3), False)
    assert show.press(Key.A) is True
    assert show.press(Key.RIGHT) is True
    assert show.index == 2
    assert show.press(Key.RIGHT) is False
    assert show.quit is False
    assert show.press(Key.A) is False
    assert show.quit is True


def test_slideshow_back_from_first_exits_with_b_only():
    show = Slideshow(_slides(3), False)
    assert show.press(Key.LEFT) is False
    assert show.quit is False
    show.press(Key.B)
    assert show.quit is True
    assert show.index == 0


def test_slideshow_back_moves():
    show = Slideshow(_slides(3), False)
    show.press(Key.A)
    assert show.press(Key.B) is True
    assert show.index == 0


def test_slideshow_menu_and_y():
    show = Slideshow(_slides(2), False)
    assert show.press(Key.Y) is True
    assert show.show_theme_controls is True
    show.press(Key.MENU)
    assert show.quit is True


def test_info_panel_keys():
    show = Slideshow([], True)
    assert show.show_theme_controls is True
    assert show.press(Key.RIGHT) is False
    assert show.press(Key.LEFT) is False
    assert show.quit is False
    show.press(Key.B)
    assert show.quit is True


def test_header_title():
    show = Slideshow([Slide("/dir/a.png"), Slide("/dir/b.png", "Bee")], False)
    assert show.header_title() == "a.png"
    show.press(Key.A)
    assert show.header_title() == "Bee"
    assert Slideshow([], True).header_title() is None


def test_button_hints():
    show = Slideshow(_slides(3), False)
    assert show.button_hints() == (slideshow.LABEL_NEXT, slideshow.LABEL_EXIT)
    show.press(Key.A)
    assert show.button_hints() == (slideshow.LABEL_NEXT, slideshow.LABEL_BACK)
    show.press(Key.A)
    assert show.button_hints() == (slideshow.LABEL_EXIT, slideshow.LABEL_BACK)
    assert Slideshow(_slides(1), False).button_hints() == (slideshow.LABEL_OK, None)
    assert Slideshow([], True).button_hints() == (slideshow.LABEL_OK, None)