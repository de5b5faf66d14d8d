"""Run configuration: YAML file + env var overrides.

Priority: explicit override > env var > YAML file > default.
Env vars use EVENTLOG_{FIELD_NAME} convention (e.g. EVENTLOG_FILE_PATH=out.log).
YAML file default: ~/.eventlog/config.yaml
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any

import yaml

from eventlog.core.models import DEFAULT_TIMESTAMP_FORMAT
from eventlog.core.publisher import FaultPolicy
from eventlog.sinks.file_sink import DEFAULT_FILE_PATH

DEFAULT_MESSAGE = "LogEvent published"
_DEFAULT_PATH = Path("~/.eventlog/config.yaml").expanduser()


class ConfigError(ValueError):
    """Configuration is unreadable, malformed, or names something that doesn't exist."""


def _split_names(raw: str | list | tuple) -> tuple[str, ...]:
    if isinstance(raw, str):
        raw = raw.split(",")
    elif not isinstance(raw, (list, tuple)):
        raise ConfigError(f"sinks: expected a list or comma-separated string, got {raw!r}")
    return tuple(str(n).strip() for n in raw if str(n).strip())


@dataclass
class EventlogConfig:
    message: str = DEFAULT_MESSAGE
    file_path: str = DEFAULT_FILE_PATH
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT
    fault_policy: str = FaultPolicy.PROPAGATE.value
    # Subscription order == delivery order
    sinks: tuple[str, ...] = field(default_factory=lambda: ("console", "file"))

    def __post_init__(self) -> None:
        self.sinks = _split_names(self.sinks)
        try:
            FaultPolicy(self.fault_policy)
        except ValueError as err:
            raise ConfigError(
                f"Unknown fault policy: {self.fault_policy!r}. "
                f"Available: {[p.value for p in FaultPolicy]}."
            ) from err

    @classmethod
    def load(cls, path: Path | None = None) -> EventlogConfig:
        """Load config from YAML file, then override with env vars."""
        file_path = path or _DEFAULT_PATH
        file_values: dict[str, Any] = {}

        if file_path.exists():
            try:
                raw = yaml.safe_load(file_path.read_text()) or {}
            except OSError as err:
                raise ConfigError(f"{file_path}: cannot read config: {err.strerror or err}") from err
            except yaml.YAMLError as err:
                raise ConfigError(f"{file_path}: invalid YAML: {err}") from err
            if not isinstance(raw, dict):
                raise ConfigError(f"{file_path}: expected a mapping at top level")
            file_values = raw

        kwargs: dict[str, Any] = {}
        for f in fields(cls):
            name = f.name
            env_key = f"EVENTLOG_{name.upper()}"

            if env_key in os.environ:
                kwargs[name] = os.environ[env_key]
            elif file_values.get(name) is not None:
                value = file_values[name]
                kwargs[name] = value if name == "sinks" else str(value)
            # else (absent or null): use dataclass default

        return cls(**kwargs)

    def with_overrides(self, **overrides: Any) -> EventlogConfig:
        """Return a copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    def to_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}
