from __future__ import annotations

import typing as t

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    name: str = "aspect_attributes"
    log_level: str = "INFO"
    log_format: str = "[{asctime}] [{levelname:8s}] {name:17s}: {message}"

    query_name_format: str = "{name}?"
    slot_name_format: str = "_{name}"
    attribute_method: t.Optional[str] = "attribute"
    update_method: t.Optional[str] = "update_attributes"

    model_config = SettingsConfigDict(env_prefix="aspect_", extra="forbid")

    @field_validator("query_name_format", "slot_name_format")
    @classmethod
    def must_contain_name(cls, value: str):
        if "{name}" not in value:
            raise ValueError("format must contain '{name}'")
        return value

    @field_validator("slot_name_format")
    @classmethod
    def slot_must_differ_from_name(cls, value: str):
        if value == "{name}":
            raise ValueError("slot name cannot be equal to the attribute name")
        return value

    @field_validator("attribute_method", "update_method")
    @classmethod
    def must_be_identifier(cls, value: t.Optional[str]):
        if value and not value.isidentifier():
            raise ValueError(f"'{value}' is not a valid method name")
        return value or None

    def query_name(self, name: str) -> str:
        return self.query_name_format.format(name=name)

    def slot_name(self, name: str) -> str:
        return self.slot_name_format.format(name=name)


global_settings: t.Optional[Settings] = None


def get_settings() -> Settings:
    global global_settings
    if global_settings is None:
        global_settings = Settings()
    return global_settings


def use_settings(settings: t.Optional[Settings] = None, **kwargs):
    """Install ``settings`` (or a ``Settings`` created from ``kwargs``) as the active settings.

    The return value can be used as a context manager to restore the previous settings
    on exit::

        with use_settings(query_name_format="is_{name}"):
            ...

    Accessor names are resolved when an attribute is defined, so changing settings does not
    affect classes that already exist.
    """
    if settings is None:
        settings = Settings(**kwargs)
    elif kwargs:
        raise ValueError("Supply either a Settings object or keyword arguments, not both")
    return _TemporarySettings(settings)


def reset_settings():
    global global_settings
    global_settings = None


class _TemporarySettings:
    def __init__(self, settings: Settings):
        global global_settings
        self.backup = global_settings
        global_settings = settings
        self.settings = settings

    def __enter__(self):
        return self.settings

    def __exit__(self, exc_type, exc_val, exc_tb):
        global global_settings
        global_settings = self.backup
