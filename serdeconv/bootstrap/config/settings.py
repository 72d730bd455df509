from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)


class CodecSettings(BaseModel):
    json_indent: Annotated[
        int,
        Field(
            description="Indentation width used when JSON is pretty printed.",
            default=2,
            ge=0
        )
    ]

    json_ensure_ascii: Annotated[
        bool,
        Field(
            description=(
                "Escape every non-ASCII character in JSON output.\n"
                "By default UTF-8 text is written as-is."
            ),
            default=False
        )
    ]

    json_sort_keys: Annotated[
        bool,
        Field(
            description=(
                "Sort object keys in JSON output.\n"
                "By default keys keep the order of the source document."
            ),
            default=False
        )
    ]


class OutputSettings(BaseModel):
    pretty: Annotated[
        bool,
        Field(
            description="Pretty print JSON written by 'convert' unless --pretty is given.",
            default=False
        )
    ]

    render: Annotated[
        Literal["yaml", "json"],
        Field(
            description="Rendering used by 'show' unless --as is given.",
            default="yaml"
        )
    ]


class SerdeconvConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SERDECONV_",
        env_nested_delimiter="__",
        extra="ignore"
    )

    codec: Annotated[
        CodecSettings,
        Field(
            description=(
                "Codec options.\n"
                "Tune how the JSON back end lays out its output. TOML and\n"
                "MessagePack have no layout options."
            ),
            default_factory=CodecSettings
        )
    ]

    output: Annotated[
        OutputSettings,
        Field(
            description="Command line output defaults.",
            default_factory=OutputSettings
        )
    ]

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            YamlConfigSettingsSource(settings_cls),
        )

    @classmethod
    def from_file(cls, file: Path | None) -> "SerdeconvConfig":
        if file is None:
            return cls()

        class FileConfig(cls):  # type: ignore[valid-type, misc]
            model_config = SettingsConfigDict(yaml_file=file)

        return FileConfig()
