"""Settings models: the effective configuration of one run and its partial sources.

Field names are Pythonic; aliases are the keys the config file has always used,
so existing ``.check.yaml`` files load unchanged and are written back the same way.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

_STRING_FIELDS = (
    "url",
    "log_path",
    "author",
    "recipient",
    "config_path",
    "smtp_host",
    "smtp_port",
    "smtp_user",
    "smtp_password",
    "subject",
    "body",
)


def _coerce_scalar(value: Any) -> Any:
    # YAML turns `port: 587` into an int; every string field accepts plain scalars.
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, int | float):
        return str(value)
    return value


class Settings(BaseModel):
    """Immutable, fully merged settings threaded through every component of a run."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    url: str = Field(default="", alias="url")
    log_path: str = Field(default="", alias="log")
    author: str = Field(default="", alias="author")
    recipient: str = Field(default="", alias="recipient")
    config_path: str = Field(default="", alias="config")
    smtp_host: str = Field(default="", alias="smtp")
    smtp_port: str = Field(default="", alias="port")
    smtp_user: str = Field(default="", alias="user")
    smtp_password: str = Field(default="", alias="password")
    subject: str = Field(default="", alias="subject")
    body: str = Field(default="", alias="body")
    debug: bool = Field(default=False, alias="debug")

    @field_validator(*_STRING_FIELDS, mode="before")
    @classmethod
    def _scalar_to_str(cls, value: Any) -> Any:
        return _coerce_scalar(value)

    @property
    def has_url(self) -> bool:
        return bool(self.url)

    def to_mapping(self) -> dict[str, str | bool]:
        """Return the persisted key → value mapping, keyed by config file names."""
        return self.model_dump(by_alias=True)

    def redacted(self) -> dict[str, str | bool]:
        """Same as to_mapping, with the SMTP password masked for diagnostics."""
        mapping = self.to_mapping()
        if mapping["password"]:
            mapping["password"] = "***"
        return mapping


class PartialSettings(BaseModel):
    """Settings from a single source; any field may be absent (None)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    url: str | None = Field(default=None, alias="url")
    log_path: str | None = Field(default=None, alias="log")
    author: str | None = Field(default=None, alias="author")
    recipient: str | None = Field(default=None, alias="recipient")
    config_path: str | None = Field(default=None, alias="config")
    smtp_host: str | None = Field(default=None, alias="smtp")
    smtp_port: str | None = Field(default=None, alias="port")
    smtp_user: str | None = Field(default=None, alias="user")
    smtp_password: str | None = Field(default=None, alias="password")
    subject: str | None = Field(default=None, alias="subject")
    body: str | None = Field(default=None, alias="body")
    debug: bool | None = Field(default=None, alias="debug")

    @field_validator(*_STRING_FIELDS, mode="before")
    @classmethod
    def _scalar_to_str(cls, value: Any) -> Any:
        return _coerce_scalar(value)
