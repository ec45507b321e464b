from dataclasses import dataclass
from pathlib import Path

from config import ConfigurationSet, config_from_dict, config_from_env, config_from_yaml

from scouting_search.exceptions import ConfigurationError

_DEFAULTS: dict[str, object] = {
    "database": {
        "path": "~/.local/share/scouting/scouting.db",
    },
    "embedding": {
        "base_url": "http://localhost:11434",
        "model": "nomic-embed-text",
        "timeout": 30.0,
        "type": "season_summary",
    },
    "pipeline": {
        "batch_size": 100,
        "min_plate_appearances": 50,
    },
    "search": {
        "limit": 10,
    },
}


@dataclass(frozen=True)
class Settings:
    database_path: Path
    embedding_base_url: str
    embedding_model: str
    embedding_timeout: float
    embedding_type: str
    batch_size: int
    min_plate_appearances: int
    search_limit: int


def create_config(
    yaml_path: str = "scouting.yaml",
    env_prefix: str = "SCOUTING",
    defaults: dict[str, object] | None = None,
) -> ConfigurationSet:
    """Create a layered configuration.

    Priority (highest to lowest): env vars > YAML file > defaults dict.

    Args:
        yaml_path: Path to the YAML config file.
        env_prefix: Prefix for environment variables, e.g. ``SCOUTING__DATABASE__PATH``.
        defaults: Default configuration values.
    """
    if defaults is None:
        defaults = _DEFAULTS

    return ConfigurationSet(
        config_from_env(env_prefix, separator="__", lowercase_keys=True),
        config_from_yaml(yaml_path, read_from_file=True, ignore_missing_paths=True),
        config_from_dict(defaults),
    )


def _get(cfg: ConfigurationSet, key: str) -> str:
    try:
        value = cfg[key]
    except KeyError as exc:
        raise ConfigurationError(f"Missing configuration key '{key}'") from exc
    return str(value)


def _positive_int(cfg: ConfigurationSet, key: str) -> int:
    raw = _get(cfg, key)
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"'{key}' must be an integer, got {raw!r}") from exc
    if value < 1:
        raise ConfigurationError(f"'{key}' must be at least 1, got {value}")
    return value


def load_settings(cfg: ConfigurationSet | None = None) -> Settings:
    if cfg is None:
        cfg = create_config()
    raw_timeout = _get(cfg, "embedding.timeout")
    try:
        timeout = float(raw_timeout)
    except ValueError as exc:
        raise ConfigurationError(f"'embedding.timeout' must be a number, got {raw_timeout!r}") from exc
    min_pa = _get(cfg, "pipeline.min_plate_appearances")
    if not min_pa.isdigit():
        raise ConfigurationError(f"'pipeline.min_plate_appearances' must be a non-negative integer, got {min_pa!r}")
    return Settings(
        database_path=Path(_get(cfg, "database.path")).expanduser(),
        embedding_base_url=_get(cfg, "embedding.base_url"),
        embedding_model=_get(cfg, "embedding.model"),
        embedding_timeout=timeout,
        embedding_type=_get(cfg, "embedding.type"),
        batch_size=_positive_int(cfg, "pipeline.batch_size"),
        min_plate_appearances=int(min_pa),
        search_limit=_positive_int(cfg, "search.limit"),
    )
