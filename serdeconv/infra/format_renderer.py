import json
from datetime import date, datetime, time
from typing import Any

import msgpack
import yaml

from serdeconv.core.ports.render import Renderer


class JsonRenderer(Renderer):
    def __init__(self, indent: int = 2) -> None:
        self._indent = indent

    def render(self, data: Any) -> str:
        normalized = _normalize(data)
        return json.dumps(normalized, indent=self._indent, ensure_ascii=False, default=self._default)

    @staticmethod
    def _default(obj: Any) -> Any:
        if isinstance(obj, (datetime, date, time)):
            return obj.isoformat()
        raise TypeError(f"Object of type {type(obj).__name__} is not renderable")


class YamlRenderer(Renderer):
    def render(self, data: Any) -> str:
        normalized = _normalize(data)
        return yaml.safe_dump(normalized, sort_keys=False, allow_unicode=True)


def _normalize(obj: Any) -> Any:
    """
    Rewrite decoded values that JSON and YAML have no notation for:
        - bytes become lowercase hex
        - msgpack ext values become {"ext": code, "data": hex}
        - msgpack timestamps become UTC datetimes
    Map keys are rewritten the same way, ext and timestamp keys as strings.
    """
    if isinstance(obj, dict):
        return {_key(k): _normalize(v) for k, v in obj.items()}

    if isinstance(obj, msgpack.ExtType):
        return {"ext": obj.code, "data": obj.data.hex()}

    if isinstance(obj, (list, tuple)):
        return [_normalize(x) for x in obj]

    if isinstance(obj, (bytes, bytearray)):
        return bytes(obj).hex()

    if isinstance(obj, msgpack.Timestamp):
        return obj.to_datetime()

    return obj


def _key(key: Any) -> Any:
    if isinstance(key, msgpack.ExtType):
        return f"ext({key.code}):{key.data.hex()}"

    if isinstance(key, msgpack.Timestamp):
        return key.to_datetime().isoformat()

    if isinstance(key, (datetime, date, time)):
        return key.isoformat()

    if isinstance(key, (bytes, bytearray)):
        return bytes(key).hex()

    return key
