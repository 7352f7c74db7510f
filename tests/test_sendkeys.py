import pytest

from onionkit.sendkeys import (
    EV_KEY,
    KeyEvent,
    encode_event,
    main,
    parse_events,
    send_events,
)


def test_parse_events_pairs():
    assert parse_events(["116", "1", "116", "0"]) == [KeyEvent(116, 1), KeyEvent(116, 0)]


def test_parse_events_lenient_numbers():
    assert parse_events(["abc", "2x"]) == [KeyEvent(0, 2)]


@pytest.mark.parametrize("args", [[], ["1"], ["1", "2", "3"]])
def test_parse_events_bad_count(args):
    with pytest.raises(ValueError):
        parse_events(args)


def test_parse_events_too_many():
    with pytest.raises(ValueError):
        parse_events(["1", "1"] * 101)


def test_encode_event_bytes():
    data = encode_event(KeyEvent(116, 1))
    assert data == b"\x00" * 8 + b"\x01\x00" + b"\x74\x00" + b"\x01\x00\x00\x00"
    assert KeyEvent(1, 0).type == EV_KEY


def test_send_events_writes_each_event(tmp_path):
    device = tmp_path / "event0"
    device.write_bytes(b"")
    events = [KeyEvent(30, 1), KeyEvent(30, 0)]
    send_events(events, str(device))
    assert device.read_bytes() == encode_event(events[-1])


def test_send_events_missing_device(tmp_path):
    with pytest.raises(FileNotFoundError):
        send_events([KeyEvent(1, 1)], str(tmp_path / "missing"))


def test_main_usage_error(capsys):
    assert main(["5"]) == 1
    assert "Usage: sendkeys" in capsys.readouterr().out