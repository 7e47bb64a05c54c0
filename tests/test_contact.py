import pytest

from toposwarm.contact import (
    ContactEvent,
    ContactRecorder,
    ContactsState,
    ContactState,
    Vector3,
    event_from_state,
    file_name_for_node,
    parse_contact_time,
    parse_for_link,
)

INFO = (
    "Debug:  i:(0/1)     my geom:agent1::base_link::base_link_collision   "
    "other geom:ground_plane::link::collision         time:12.345000000\n"
)


def _msg(x=1.5, y=-2.0):
    return ContactsState(states=[ContactState(info=INFO, contact_positions=[Vector3(x, y, 0.0)])])


def test_parse_for_link_my_geom():
    assert parse_for_link(INFO, "my geom:") == "agent1"


def test_parse_for_link_other_geom():
    assert parse_for_link(INFO, "other geom:") == "ground_plane"


def test_parse_for_link_without_delimiter_returns_rest():
    assert parse_for_link("key:abc", "key:") == "abc"


def test_parse_for_link_missing_key():
    with pytest.raises(ValueError):
        parse_for_link(INFO, "absent:")


def test_parse_contact_time_reads_token():
    assert parse_contact_time(INFO) == pytest.approx(12.345)


def test_parse_contact_time_non_numeric_is_zero():
    assert parse_contact_time("time:abc") == 0.0


def test_parse_contact_time_missing():
    with pytest.raises(ValueError):
        parse_contact_time("no stamp here")


def test_event_from_state():
    event = event_from_state(_msg().states[0])
    assert event.my_geometry == "agent1"
    assert event.other_geometry == "ground_plane"
    assert event.position == Vector3(1.5, -2.0, 0.0)
    assert event.time == parse_contact_time(INFO)


def test_event_from_state_without_positions():
    with pytest.raises(ValueError):
        event_from_state(ContactState(info=INFO, contact_positions=[]))


def test_file_name_for_node():
    assert file_name_for_node("/subscribe_to_contact_message") == "subscribe_to_contact_message.txt"


def test_format_line_fields():
    event = ContactEvent(2.5, Vector3(1.5, -2.0, 0.0), "a", "b")
    assert event.format_line() == "t: 2.5,\tx: 1.5,\ty: -2,\tm: a,\to: b\n"


def test_handle_ignores_empty_message(tmp_path):
    recorder = ContactRecorder("/node", tmp_path, 5)
    recorder.handle(ContactsState())
    assert recorder.events == []


def test_recorder_stops_at_limit_and_saves_once(tmp_path):
    recorder = ContactRecorder("/rec/node", tmp_path, 3)
    for _ in range(3):
        recorder.receive(_msg())
    assert len(recorder.events) == 3
    assert not recorder.saved
    recorder.receive(_msg())
    assert recorder.saved
    path = tmp_path / "recnode.txt"
    lines = path.read_text(encoding="utf-8").splitlines(keepends=True)
    assert lines == [recorder.events[0].format_line()] * 3
    path.write_text("changed", encoding="utf-8")
    recorder.receive(_msg())
    assert path.read_text(encoding="utf-8") == "changed"
    assert len(recorder.events) == 3


def test_write_returns_path(tmp_path):
    recorder = ContactRecorder("/n", tmp_path, 2)
    recorder.receive(_msg())
    path = recorder.write()
    assert path == tmp_path / "n.txt"
    assert path.read_text(encoding="utf-8") == recorder.events[0].format_line()


def test_write_to_missing_directory_raises(tmp_path):
    recorder = ContactRecorder("/n", tmp_path / "missing", 1)
    with pytest.raises(OSError):
        recorder.write()


def test_receive_logs_write_failure(tmp_path):
    recorder = ContactRecorder("/n", tmp_path / "missing", 1)
    recorder.receive(_msg())
    recorder.receive(_msg())
    assert recorder.saved
    assert not (tmp_path / "missing").exists()