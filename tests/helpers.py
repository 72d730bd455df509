from dataclasses import dataclass
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from serdeconv.convert.mixin import Convertible


@dataclass
class Record:
    name: str
    count: int


@dataclass
class Foo(Convertible):
    bar: str
    baz: int


class Server(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    host_name: Annotated[str, Field(alias="host-name")]
    port: int = 8080
    tags: list[str] = []


class Service(Convertible, BaseModel):
    name: str
    server: Server
