from datetime import date, datetime

import pytest

from serdeconv.convert.defaults import get_converter
from serdeconv.core.converter import Converter
from serdeconv.core.models.format import Format
from tests.fake.fake_codec import FakeCodec
from tests.helpers import Record


@pytest.fixture
def converter() -> Converter:
    return get_converter()


@pytest.fixture
def fake_codec() -> FakeCodec:
    return FakeCodec(Format.JSON)


@pytest.fixture
def fake_converter(fake_codec) -> Converter:
    return Converter([fake_codec])


@pytest.fixture
def record() -> Record:
    return Record(name="a", count=1)


# One representative document per format: each value only uses what the
# format can carry, so decode(encode(v)) must give v back.
ROUND_TRIP_VALUES = {
    Format.JSON: {
        "name": "a",
        "count": 1,
        "ratio": 0.25,
        "ok": True,
        "missing": None,
        "tags": ["x", "y"],
        "nested": {"k": [1, {"z": "été"}], "empty": {}},
    },
    Format.TOML: {
        "title": "serdeconv",
        "count": -42,
        "ratio": 1.5,
        "enabled": False,
        "released": date(2024, 5, 1),
        "updated": datetime(2024, 5, 1, 12, 30, 0),
        "server": {"host": "127.0.0.1", "ports": [8000, 8001]},
        "users": [{"name": "alice"}, {"name": "bob"}],
    },
    Format.MSGPACK: {
        "name": "a",
        "payload": b"\x00\xff\x10",
        1: "int key",
        "big": 2 ** 63,
        "negative": -(2 ** 63),
        "missing": None,
        "nested": [[1, 2], {"k": 0.5}],
    },
}


@pytest.fixture(params=list(Format), ids=lambda fmt: fmt.value)
def fmt(request) -> Format:
    return request.param


@pytest.fixture
def round_trip_value(fmt):
    return ROUND_TRIP_VALUES[fmt]
