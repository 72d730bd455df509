import msgpack
import pytest

from serdeconv.core.errors import DecodingError, EncodingError
from serdeconv.core.models.format import Format
from serdeconv.infra.msgpack_codec import MsgPackCodec


@pytest.fixture
def codec() -> MsgPackCodec:
    return MsgPackCodec()


@pytest.mark.ut
def test_encode_record(codec):
    assert codec.encode({"name": "a", "count": 1}) == b"\x82\xa4name\xa1a\xa5count\x01"


@pytest.mark.ut
def test_str_and_bytes_stay_distinct(codec):
    value = {"text": "abc", "raw": b"abc"}
    decoded = codec.decode(codec.encode(value))

    assert decoded == value
    assert isinstance(decoded["text"], str)
    assert isinstance(decoded["raw"], bytes)


@pytest.mark.ut
def test_non_string_keys_round_trip(codec):
    value = {1: "one", -2: "minus two"}
    assert codec.decode(codec.encode(value)) == value


@pytest.mark.ut
@pytest.mark.parametrize("value", [
    {"obj": object()},
    {"too_big": 2 ** 64},
    {"set": {1}},
])
def test_unrepresentable_values(codec, value):
    with pytest.raises(EncodingError) as exc_info:
        codec.encode(value)

    assert exc_info.value.format is Format.MSGPACK


@pytest.mark.ut
def test_truncated_input(codec):
    data = codec.encode({"name": "a", "count": 1})

    for cut in range(len(data)):
        with pytest.raises(DecodingError):
            codec.decode(data[:cut])


@pytest.mark.ut
@pytest.mark.parametrize("data", [
    b"\xc1",
    b"\x01\x02",
    b"\xa3\xff\xfe\xfd",
])
def test_malformed_input(codec, data):
    with pytest.raises(DecodingError):
        codec.decode(data)


@pytest.mark.ut
@pytest.mark.parametrize("value, where", [
    ({(1, 2): "x"}, "the root map"),
    ({"outer": [{"ok": 1}, {("a",): 2}]}, "'outer.1'"),
])
def test_array_keys_are_refused(codec, value, where):
    with pytest.raises(EncodingError, match=f"map keys cannot be arrays, found .* in {where}"):
        codec.encode(value)


@pytest.mark.ut
def test_ext_type_keys_round_trip(codec):
    value = {msgpack.ExtType(5, b"\x01"): "ext"}
    assert codec.decode(codec.encode(value)) == value


@pytest.mark.ut
def test_cyclic_value(codec):
    value = {}
    value["self"] = value

    with pytest.raises(EncodingError, match="cyclic"):
        codec.encode(value)
