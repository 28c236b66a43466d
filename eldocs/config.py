"""Configuration loading for eldocs (.eldocs.yml)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".eldocs.yml"

DEFAULT_ENDPOINT = "http://localhost:8080/v1/chat/completions"
DEFAULT_MODEL = "gpt-4"

ENV_API_KEY_KEYS = ("ELDOCS_API_KEY", "OPENAI_API_KEY")
ENV_ENDPOINT_KEYS = ("ELDOCS_API_URL",)

WRITE_POLICIES = ("always", "changed")


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class LLMConfig:
    """Settings for the delegated (enrichment service) rendering mode."""

    endpoint: Optional[str] = DEFAULT_ENDPOINT
    api_key: Optional[str] = None
    model: str = DEFAULT_MODEL
    request_timeout: Optional[float] = 60.0
    debug: bool = False


@dataclass
class EldocsConfig:
    """The single configuration shape consumed by the documentation pipeline."""

    root: Path
    source_dir: Path = Path("src/main/java")
    output_dir: Path = Path("docs")
    changed_only: bool = False
    diff_base: str = "HEAD~1"
    use_ai: bool = False
    extension: str = "md"
    write_policy: str = "always"
    exclude_paths: List[str] = field(default_factory=list)
    injection_markers: List[str] = field(default_factory=lambda: ["Autowired"])
    templates_dir: Optional[Path] = None
    llm: LLMConfig = field(default_factory=LLMConfig)

    @property
    def source_path(self) -> Path:
        """Source root resolved against the project root."""
        return _resolve_against(self.root, self.source_dir)

    @property
    def output_path(self) -> Path:
        """Output root resolved against the project root."""
        return _resolve_against(self.root, self.output_dir)


def load_config(config_path: Path) -> EldocsConfig:
    """Load configuration from disk, falling back to defaults when no file exists."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        config = EldocsConfig(root=root)
        _apply_environment(config.llm)
        return config

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    config = EldocsConfig(root=root)

    source_dir = _as_str(data.get("source_dir"))
    if source_dir:
        config.source_dir = Path(source_dir)
    output_dir = _as_str(data.get("output_dir"))
    if output_dir:
        config.output_dir = Path(output_dir)

    changed_only = _as_bool(data.get("changed_only"))
    if changed_only is not None:
        config.changed_only = changed_only
    diff_base = _as_str(data.get("diff_base"))
    if diff_base:
        config.diff_base = diff_base

    use_ai = _as_bool(data.get("use_ai"))
    if use_ai is not None:
        config.use_ai = use_ai

    extension = _as_str(data.get("extension"))
    if extension:
        config.extension = extension.lstrip(".")

    write_policy = _as_str(data.get("write_policy"))
    if write_policy:
        policy = write_policy.strip().lower()
        if policy not in WRITE_POLICIES:
            raise ConfigError(
                f"write_policy must be one of {', '.join(WRITE_POLICIES)}; got '{write_policy}'"
            )
        config.write_policy = policy

    if "exclude_paths" in data:
        config.exclude_paths = _as_str_list(data.get("exclude_paths"))
    if "injection_markers" in data:
        config.injection_markers = _as_str_list(data.get("injection_markers"))

    templates_dir = _as_str(data.get("templates_dir"))
    if templates_dir:
        config.templates_dir = root / templates_dir

    llm_data = _as_dict(data.get("llm"))
    if llm_data:
        llm = config.llm
        if "endpoint" in llm_data:
            llm.endpoint = _as_str(llm_data.get("endpoint"))
        if "api_key" in llm_data:
            llm.api_key = _as_str(llm_data.get("api_key"))
        model = _as_str(llm_data.get("model"))
        if model:
            llm.model = model
        timeout = _as_float(llm_data.get("request_timeout"))
        if timeout is not None:
            llm.request_timeout = timeout
        debug = _as_bool(llm_data.get("debug"))
        if debug is not None:
            llm.debug = debug

    _apply_environment(config.llm)
    return config


def _apply_environment(llm: LLMConfig) -> None:
    if llm.api_key is None:
        llm.api_key = _first_env_value(ENV_API_KEY_KEYS)
    env_endpoint = _first_env_value(ENV_ENDPOINT_KEYS)
    if env_endpoint and llm.endpoint == DEFAULT_ENDPOINT:
        llm.endpoint = env_endpoint


def _first_env_value(keys: Sequence[str]) -> str | None:
    for key in keys:
        value = os.getenv(key)
        if value:
            return value
    return None


def _resolve_against(root: Path, path: Path) -> Path:
    expanded = path.expanduser()
    if expanded.is_absolute():
        return expanded
    return (root / expanded).resolve()


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []
