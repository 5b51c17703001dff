"""Settings precedence: merges persisted settings with per-run overrides."""

from uptime_check.config.domain.settings import PartialSettings, Settings


def _is_supplied(value: str | bool | None) -> bool:
    """An override counts only when it carries a non-empty value."""
    return value is not None and value != "" and value is not False


def resolve_settings(persisted: PartialSettings, overrides: PartialSettings) -> Settings:
    """
    Merge two partial sources into one Settings value.

    For every field a supplied override wins; otherwise the persisted value is
    used, which may itself be empty. Each field comes from exactly one source.
    Missing fields never raise; an empty ``url`` is reported by the caller via
    ``Settings.has_url``.
    """
    merged: dict[str, str | bool] = {}
    for name in Settings.model_fields:
        override = getattr(overrides, name)
        value = override if _is_supplied(override) else getattr(persisted, name)
        if value is not None:
            merged[name] = value
    return Settings(**merged)
