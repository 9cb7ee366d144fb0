"""
Configuration management for the Meeting Summarizer service.

Settings are merged from three layers, lowest priority first:

1. Built-in defaults (``DEFAULT_CONFIG``)
2. An optional YAML file (``CONFIG_PATH``, default ``./config.yml``)
3. Environment variables (loaded from ``.env`` when present)

String values in the YAML file may reference the environment with
``${VAR}`` or ``${VAR:-default}``.
"""

import logging
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    "llm": {
        "api_key": None,
        "base_url": "https://api.openai.com/v1",
        "model": "gpt-3.5-turbo",
        "max_tokens": 1000,
        "temperature": 0.7,
        "timeout_seconds": 60.0,
    },
    "smtp": {
        "host": "smtp.gmail.com",
        "port": 587,
        "username": None,
        "password": None,
        "use_tls": True,
        "from_email": None,
        "timeout_seconds": 30.0,
    },
    "server": {
        "host": "0.0.0.0",
        "port": 5000,
        "max_body_bytes": 10 * 1024 * 1024,
    },
}

# (section, key) -> environment variable
ENV_OVERRIDES = {
    ("llm", "api_key"): "OPENAI_API_KEY",
    ("llm", "base_url"): "OPENAI_BASE_URL",
    ("llm", "model"): "OPENAI_MODEL",
    ("llm", "max_tokens"): "SUMMARY_MAX_TOKENS",
    ("llm", "temperature"): "SUMMARY_TEMPERATURE",
    ("smtp", "host"): "SMTP_HOST",
    ("smtp", "port"): "SMTP_PORT",
    ("smtp", "username"): "EMAIL_USER",
    ("smtp", "password"): "EMAIL_PASS",
    ("smtp", "use_tls"): "SMTP_USE_TLS",
    ("smtp", "from_email"): "FROM_EMAIL",
    ("server", "host"): "HOST",
    ("server", "port"): "PORT",
}


@dataclass(frozen=True)
class LLMSettings:
    api_key: Optional[str] = None
    base_url: str = "https://api.openai.com/v1"
    model: str = "gpt-3.5-turbo"
    max_tokens: int = 1000
    temperature: float = 0.7
    timeout_seconds: float = 60.0


@dataclass(frozen=True)
class SMTPSettings:
    host: str = "smtp.gmail.com"
    port: int = 587
    username: Optional[str] = None
    password: Optional[str] = None
    use_tls: bool = True
    from_email: Optional[str] = None
    timeout_seconds: float = 30.0


@dataclass(frozen=True)
class ServerSettings:
    host: str = "0.0.0.0"
    port: int = 5000
    max_body_bytes: int = 10 * 1024 * 1024


@dataclass(frozen=True)
class AppSettings:
    """Process-wide immutable settings injected into each component."""

    llm: LLMSettings = field(default_factory=LLMSettings)
    smtp: SMTPSettings = field(default_factory=SMTPSettings)
    server: ServerSettings = field(default_factory=ServerSettings)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def resolve_value(value: Any) -> Any:
    """Resolve environment variable references in configuration values.

    Supports ${VAR} and ${VAR:-default} syntax. Returns the original value
    if it's not a string or doesn't match the pattern.
    """
    if isinstance(value, str) and value.startswith("${") and value.endswith("}"):
        content = value[2:-1]
        if ":-" in content:
            var_name, default_val = content.split(":-", 1)
            return os.getenv(var_name, default_val)
        else:
            return os.getenv(content, "")
    return value


def _deep_resolve_env(data: Any) -> Any:
    """Apply resolve_value to every leaf of a nested config structure."""
    if isinstance(data, dict):
        return {k: _deep_resolve_env(v) for k, v in data.items()}
    if isinstance(data, list):
        return [_deep_resolve_env(v) for v in data]
    return resolve_value(data)


def merge_configs(defaults: dict, overrides: dict) -> dict:
    """
    Deep merge two configuration dictionaries.

    Override values take precedence over defaults.
    Lists are replaced (not merged).

    Args:
        defaults: Default configuration values
        overrides: User-provided overrides

    Returns:
        Merged configuration dictionary
    """
    result = defaults.copy()

    for key, value in overrides.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value

    return result


def get_config_path() -> Path:
    """Get path to the optional YAML config file."""
    return Path(os.getenv("CONFIG_PATH", "config.yml"))


def load_config_yml(path: Optional[Path] = None) -> Dict[str, Any]:
    """Load the YAML config file, or return an empty dict when absent."""
    config_path = path or get_config_path()
    if not config_path.exists():
        logger.debug(f"No config file at {config_path}, using defaults")
        return {}

    with open(config_path, "r") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping")
    logger.info(f"Loaded config from {config_path}")
    return data


def _apply_env_overrides(config: Dict[str, Any]) -> Dict[str, Any]:
    result = {section: dict(values) for section, values in config.items()}
    for (section, key), env_var in ENV_OVERRIDES.items():
        value = os.getenv(env_var)
        if value is not None and value != "":
            result.setdefault(section, {})[key] = value
    return result


def _to_bool(value: Union[str, bool, int]) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("1", "true", "yes", "on")


def _optional_str(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


def build_settings(config: Dict[str, Any]) -> AppSettings:
    """Convert a merged config dictionary into typed, frozen settings."""
    llm = config.get("llm", {})
    smtp = config.get("smtp", {})
    server = config.get("server", {})

    username = _optional_str(smtp.get("username"))

    return AppSettings(
        llm=LLMSettings(
            api_key=_optional_str(llm.get("api_key")),
            base_url=str(llm.get("base_url")),
            model=str(llm.get("model")),
            max_tokens=int(llm.get("max_tokens")),
            temperature=float(llm.get("temperature")),
            timeout_seconds=float(llm.get("timeout_seconds")),
        ),
        smtp=SMTPSettings(
            host=str(smtp.get("host")),
            port=int(smtp.get("port")),
            username=username,
            password=_optional_str(smtp.get("password")),
            use_tls=_to_bool(smtp.get("use_tls")),
            # Sender address defaults to the SMTP login
            from_email=_optional_str(smtp.get("from_email")) or username,
            timeout_seconds=float(smtp.get("timeout_seconds")),
        ),
        server=ServerSettings(
            host=str(server.get("host")),
            port=int(server.get("port")),
            max_body_bytes=int(server.get("max_body_bytes")),
        ),
    )


def load_settings(config_path: Optional[Path] = None, load_env_file: bool = True) -> AppSettings:
    """
    Load settings from defaults, the YAML file and the environment.

    Args:
        config_path: Explicit YAML path (defaults to ``CONFIG_PATH``)
        load_env_file: Whether to read ``.env`` into the environment first

    Returns:
        Frozen AppSettings

    Raises:
        ValueError: If a value cannot be converted to its expected type
    """
    if load_env_file:
        load_dotenv()

    user_config = _deep_resolve_env(load_config_yml(config_path))
    merged = merge_configs(DEFAULT_CONFIG, user_config)
    merged = _apply_env_overrides(merged)

    try:
        return build_settings(merged)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid configuration: {e}") from e
