import json

from pydaglp.engine.emitter import format_line, format_path, format_path_json
from pydaglp.interfaces.models import CommitNode


def make_path():
    return [
        CommitNode(identifier="A", index=2, timestamp=100),
        CommitNode(identifier="B", index=1, timestamp=None),
        CommitNode(identifier="D", index=0, timestamp=400),
    ]


def test_format_line():
    assert format_line(CommitNode(identifier="abc", index=0, timestamp=1700000000)) == "abc 1700000000"


def test_unset_timestamp_uses_marker():
    assert format_line(CommitNode(identifier="abc", index=0)) == "abc -"


def test_format_path_preserves_order():
    assert list(format_path(make_path())) == ["A 100", "B -", "D 400"]


def test_format_path_json():
    data = json.loads(format_path_json(make_path()))
    assert data == [
        {"commit": "A", "timestamp": 100, "depth": 0},
        {"commit": "B", "timestamp": None, "depth": 1},
        {"commit": "D", "timestamp": 400, "depth": 2},
    ]
