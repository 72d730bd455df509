import dataclasses
from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, TypeAdapter, ValidationError

from serdeconv.core.errors import DecodingError
from serdeconv.core.models.format import Format


def to_value(obj: Any) -> Any:
    """
    Normalize a serializable object into a generic value tree.

    The generic value is built from builtins only:
        - pydantic models are dumped by alias
        - dataclass instances become dicts keyed by field name
        - enums are replaced by their value
        - tuples become lists (named tuples, such as msgpack.ExtType, are
          kept for the codec)
        - mappings keep their keys, values are normalized recursively

    Anything else is returned unchanged and left for the codec to accept
    or reject.
    """
    if isinstance(obj, BaseModel):
        return to_value(obj.model_dump(mode="python", by_alias=True))

    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return to_value(dataclasses.asdict(obj))

    if isinstance(obj, Enum):
        return obj.value

    if isinstance(obj, Mapping):
        return {k: to_value(v) for k, v in obj.items()}

    if isinstance(obj, list) or (isinstance(obj, tuple) and not hasattr(obj, "_fields")):
        return [to_value(v) for v in obj]

    return obj


def from_value(data: Any, type: Any = None, format: Format | None = None) -> Any:
    """
    Rebuild a typed value from a generic value tree.

    When `type` is None the generic value is returned as-is. Otherwise
    the data is validated with a pydantic TypeAdapter, which accepts
    dataclasses, pydantic models, TypedDicts and builtin generics alike.
    Structural mismatches raise DecodingError tagged with `format`.
    """
    if type is None:
        return data

    try:
        return TypeAdapter(type).validate_python(data)
    except ValidationError as ex:
        raise DecodingError(format, describe_validation_error(ex)) from ex


def describe_validation_error(ex: ValidationError) -> str:
    msg = []
    for err in ex.errors(include_url=False):
        loc = ".".join(str(part) for part in err["loc"])
        msg.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(msg)
