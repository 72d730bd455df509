import io

import pytest

from serdeconv.api import (
    DecodingError,
    EncodingError,
    Format,
    decode,
    encode,
    from_json,
    from_json_bytes,
    from_json_reader,
    from_json_str,
    from_msgpack,
    from_msgpack_bytes,
    from_msgpack_reader,
    from_toml,
    from_toml_bytes,
    from_toml_reader,
    from_toml_str,
    to_json,
    to_json_bytes,
    to_json_string,
    to_json_string_pretty,
    to_json_writer,
    to_json_writer_pretty,
    to_msgpack,
    to_msgpack_bytes,
    to_msgpack_writer,
    to_toml,
    to_toml_string,
    to_toml_writer,
)
from tests.helpers import Record, Server

TO = {
    Format.JSON: to_json,
    Format.TOML: to_toml,
    Format.MSGPACK: to_msgpack,
}

FROM = {
    Format.JSON: from_json,
    Format.TOML: from_toml,
    Format.MSGPACK: from_msgpack,
}

MALFORMED = {
    Format.JSON: [b'{"name": "a", "count": 1', b"{]", b"\x00"],
    Format.TOML: [b'name = "a', b"[a]\n[a]\n", b"x = [1, 2"],
    Format.MSGPACK: [b"\x82\xa4name", b"\xc1", b"\x91"],
}


@pytest.mark.ut
def test_round_trip(fmt, round_trip_value):
    encoded = TO[fmt](round_trip_value)

    assert FROM[fmt](encoded) == round_trip_value


@pytest.mark.ut
def test_round_trip_through_generic_dispatch(fmt, round_trip_value):
    assert decode(encode(round_trip_value, fmt), fmt) == round_trip_value


@pytest.mark.ut
def test_malformed_input_raises_decoding_error(fmt):
    for data in MALFORMED[fmt]:
        with pytest.raises(DecodingError) as exc_info:
            FROM[fmt](data)
        assert exc_info.value.format is fmt


@pytest.mark.ut
def test_typed_round_trip(fmt, record):
    assert FROM[fmt](TO[fmt](record), type=Record) == record


@pytest.mark.ut
def test_typed_decode_shape_mismatch(fmt):
    encoded = TO[fmt]({"name": "a", "count": [1, 2]})

    with pytest.raises(DecodingError) as exc_info:
        FROM[fmt](encoded, type=Record)

    assert exc_info.value.format is fmt
    assert "count" in exc_info.value.message


@pytest.mark.ut
def test_json_record_example(record):
    text = to_json({"name": "a", "count": 1})

    assert text == '{"name":"a","count":1}'
    assert from_json(text) == {"name": "a", "count": 1}
    assert to_json(record) == text


@pytest.mark.ut
def test_toml_non_string_keys_example():
    with pytest.raises(EncodingError) as exc_info:
        to_toml({1: "a", 2: "b"})

    assert exc_info.value.format is Format.TOML


@pytest.mark.ut
def test_toml_string_example():
    assert to_toml_string({"bar": "aaa", "baz": 123}) == 'bar = "aaa"\nbaz = 123\n'
    assert from_toml_str('bar = "aaa"\nbaz = 123\n') == {"bar": "aaa", "baz": 123}
    assert from_toml_bytes(b'bar = "aaa"\n') == {"bar": "aaa"}


@pytest.mark.ut
def test_toml_with_model_aliases():
    server = Server(host_name="h", port=1, tags=["a"])
    text = to_toml(server)

    assert 'host-name = "h"' in text
    assert from_toml(text, type=Server) == server


@pytest.mark.ut
def test_json_helpers():
    value = {"a": [1, 2]}

    assert to_json_string(value) == '{"a":[1,2]}'
    assert to_json_bytes(value) == b'{"a":[1,2]}'
    assert to_json_string_pretty(value) == '{\n  "a": [\n    1,\n    2\n  ]\n}'
    assert from_json_str('{"a":[1,2]}') == value
    assert from_json_bytes(b'{"a":[1,2]}') == value


@pytest.mark.ut
def test_json_writer_and_reader():
    buf = io.StringIO()
    to_json_writer({"a": 1}, buf)
    assert buf.getvalue() == '{"a":1}'

    pretty = io.StringIO()
    to_json_writer_pretty({"a": 1}, pretty)
    assert pretty.getvalue() == '{\n  "a": 1\n}'

    assert from_json_reader(io.BytesIO(b'{"a":1}')) == {"a": 1}


@pytest.mark.ut
def test_toml_writer_and_reader():
    buf = io.StringIO()
    to_toml_writer({"a": 1}, buf)
    assert buf.getvalue() == "a = 1\n"

    raw = io.BytesIO()
    to_toml_writer({"a": 1}, raw)
    assert raw.getvalue() == b"a = 1\n"

    assert from_toml_reader(io.StringIO("a = 1\n")) == {"a": 1}


@pytest.mark.ut
def test_msgpack_helpers():
    data = to_msgpack_bytes({"a": b"\x00"})

    assert data == to_msgpack({"a": b"\x00"})
    assert from_msgpack_bytes(data) == {"a": b"\x00"}

    buf = io.BytesIO()
    to_msgpack_writer({"a": 1}, buf)
    buf.seek(0)
    assert from_msgpack_reader(buf) == {"a": 1}


@pytest.mark.ut
def test_encoding_failure_leaves_writer_untouched():
    buf = io.StringIO()

    with pytest.raises(EncodingError):
        to_json_writer({"ok": 1, "raw": b"x"}, buf)

    assert buf.getvalue() == ""


@pytest.mark.ut
def test_cyclic_values_are_refused():
    items = []
    items.append(items)
    table = {}
    table["self"] = table

    with pytest.raises(EncodingError):
        to_json(items)
    with pytest.raises(EncodingError):
        to_msgpack(table)


@pytest.mark.ut
def test_msgpack_refuses_keys_it_cannot_decode():
    with pytest.raises(EncodingError, match="map keys cannot be arrays"):
        to_msgpack({(1, 2): "x"})
