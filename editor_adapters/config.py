"""editor-adapters configuration management using TOML."""

import tomllib
from dataclasses import dataclass
from pathlib import Path

from editor_adapters.notifications.registry import NOTIFY_BACKENDS
from editor_adapters.pickers.registry import PICKER_BACKENDS

DEFAULT_CONFIG_PATH = Path("data") / "editor_adapters.toml"

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class AdaptersConfig:
    """Backend preferences and logging settings. Empty backend means auto-detect."""

    notification_backend: str = ""
    picker_backend: str = ""
    log_level: str = "INFO"
    log_file: str = "data/editor_adapters.log"

    def validate(self) -> list[str]:
        """Return a list of validation errors (empty if valid)."""
        errors = []
        if self.notification_backend and self.notification_backend not in NOTIFY_BACKENDS:
            errors.append(f"notification_backend must be one of {NOTIFY_BACKENDS}")
        if self.picker_backend and self.picker_backend not in PICKER_BACKENDS:
            errors.append(f"picker_backend must be one of {PICKER_BACKENDS}")
        if self.log_level not in VALID_LOG_LEVELS:
            errors.append(f"log_level must be one of {VALID_LOG_LEVELS}")
        return errors


def _toml_string(value: str) -> str:
    """Quote a value as a TOML basic string."""
    escaped = (
        str(value)
        .replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
    return f'"{escaped}"'


def _serialize_config(config: AdaptersConfig) -> str:
    """Serialize an AdaptersConfig to TOML string."""
    lines = ["# editor-adapters configuration\n"]

    lines.append("[backends]")
    lines.append(f"notification = {_toml_string(config.notification_backend)}")
    lines.append(f"picker = {_toml_string(config.picker_backend)}")
    lines.append("")

    lines.append("[logging]")
    lines.append(f"level = {_toml_string(config.log_level)}")
    lines.append(f"file = {_toml_string(config.log_file)}")
    lines.append("")

    return "\n".join(lines)


def _parse_toml_to_config(data: dict) -> AdaptersConfig:
    """Parse a TOML dict into an AdaptersConfig."""
    config = AdaptersConfig()

    backends = data.get("backends", {})
    config.notification_backend = backends.get("notification", config.notification_backend)
    config.picker_backend = backends.get("picker", config.picker_backend)

    logging_cfg = data.get("logging", {})
    config.log_level = logging_cfg.get("level", config.log_level)
    config.log_file = logging_cfg.get("file", config.log_file)

    return config


def load_config(config_path: Path | str | None = None) -> AdaptersConfig:
    """Load configuration from a TOML file. Returns defaults if file doesn't exist."""
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
    if not path.exists():
        return AdaptersConfig()
    data = tomllib.loads(path.read_text())
    return _parse_toml_to_config(data)


def save_config(config: AdaptersConfig, config_path: Path | str | None = None) -> Path:
    """Save configuration to a TOML file. Returns the path written."""
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(_serialize_config(config))
    return path


_KEYS = ("notification_backend", "picker_backend", "log_level", "log_file")


def get_config_value(config: AdaptersConfig, key: str) -> str:
    """Get a config value by key name."""
    if key not in _KEYS:
        raise KeyError(f"Unknown config key: {key}. Valid keys: {', '.join(sorted(_KEYS))}")
    return str(getattr(config, key))


def set_config_value(config: AdaptersConfig, key: str, value: str) -> AdaptersConfig:
    """Set a config value by key name."""
    if key not in _KEYS:
        raise KeyError(f"Unknown config key: {key}. Valid keys: {', '.join(sorted(_KEYS))}")
    setattr(config, key, value)
    return config
