import pytest

from serdeconv.core.errors import DecodingError, EncodingError
from serdeconv.core.models.format import Format
from serdeconv.infra.json_codec import JsonCodec


@pytest.fixture
def codec() -> JsonCodec:
    return JsonCodec()


@pytest.mark.ut
def test_compact_output(codec):
    assert codec.encode({"name": "a", "count": 1}) == b'{"name":"a","count":1}'


@pytest.mark.ut
def test_pretty_output():
    codec = JsonCodec(indent=2)

    assert codec.pretty
    assert codec.dumps({"a": [1]}) == '{\n  "a": [\n    1\n  ]\n}'


@pytest.mark.ut
def test_sort_keys_and_ascii():
    codec = JsonCodec(ensure_ascii=True, sort_keys=True)

    assert codec.dumps({"b": "é", "a": 1}) == '{"a":1,"b":"\\u00e9"}'


@pytest.mark.ut
def test_utf8_kept_by_default(codec):
    assert codec.encode({"k": "été"}) == '{"k":"été"}'.encode("utf-8")


@pytest.mark.ut
@pytest.mark.parametrize("value", [
    {"raw": b"bytes"},
    {"set": {1, 2}},
    float("nan"),
    {"inf": float("inf")},
])
def test_unrepresentable_values(codec, value):
    with pytest.raises(EncodingError) as exc_info:
        codec.encode(value)

    assert exc_info.value.format is Format.JSON


@pytest.mark.ut
@pytest.mark.parametrize("data", [
    b'{"name": "a", "count":',
    b'{"name": "a"',
    b"",
    b"[1, 2,]",
    b"NaN",
    b'{"a": 1} trailing',
    b"\xff\xfe",
])
def test_malformed_input(codec, data):
    with pytest.raises(DecodingError) as exc_info:
        codec.decode(data)

    assert exc_info.value.format is Format.JSON


@pytest.mark.ut
def test_decode(codec):
    assert codec.decode(b'{"name":"a","count":1}') == {"name": "a", "count": 1}
