"""Configuration loading from CLI args, env vars, and optional YAML file."""

import logging
import os
from dataclasses import dataclass

import yaml

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "SEARCHWORDS_CONFIG"
DEFAULT_REPORT = "querytable"

# Short selector -> report name. Full names map to themselves.
REPORT_ALIASES = {
    "q": "queries",
    "w": "words",
    "qt": "querytable",
    "cqt": "cleanquerytable",
    "wt": "wordtable",
    "g": "graph",
    "d": "dot",
}
REPORT_NAMES = tuple(REPORT_ALIASES.values())

YAML_KEYS = ("emit", "min", "dot_with_counts", "dot_url", "dot_linked_only")


class ConfigError(ValueError):
    """Fatal configuration problem, raised before any input is read."""


@dataclass(frozen=True)
class ReportConfig:
    report: str = DEFAULT_REPORT
    min_count: int = 0
    dot_with_counts: bool = False
    dot_url: str | None = None
    dot_linked_only: bool = False


def resolve_report(selector: str) -> str:
    """Map a long or short report selector to its report name."""
    name = REPORT_ALIASES.get(selector, selector)
    if name not in REPORT_NAMES:
        raise ConfigError(
            f"Unknown report {selector!r} (choose from: "
            + ", ".join(f"{n}|{s}" for s, n in REPORT_ALIASES.items())
            + ")"
        )
    return name


def load_yaml_config(path: str | None) -> dict:
    """Load report defaults from a YAML file. Returns empty dict if no path.

    The path falls back to the ``SEARCHWORDS_CONFIG`` environment variable.
    """
    path = path or os.environ.get(CONFIG_ENV_VAR)
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e.strerror}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    unknown = set(data) - set(YAML_KEYS)
    if unknown:
        logger.warning("Ignoring unknown config keys in %s: %s", path, ", ".join(sorted(unknown)))
    logger.info("Loaded YAML config from %s", path)
    return data


def _pick(cli_value, yaml_data: dict, key: str, default):
    if cli_value is not None:
        return cli_value
    return yaml_data.get(key, default)


def _flag(cli_value: bool, yaml_data: dict, key: str) -> bool:
    """A store_true option, or the YAML boolean when the flag is not given."""
    if cli_value:
        return True
    value = yaml_data.get(key, False)
    if not isinstance(value, bool):
        raise ConfigError(f"{key} must be true or false, got {value!r}")
    return value


def load_config(cli_args, yaml_data: dict) -> ReportConfig:
    """Build ReportConfig from CLI args layered over parsed YAML data."""
    selector = str(_pick(cli_args.emit, yaml_data, "emit", DEFAULT_REPORT))
    report = resolve_report(selector)

    min_count = _pick(cli_args.min, yaml_data, "min", 0)
    # bool is an int subclass; YAML "true" must not pass as 1.
    if isinstance(min_count, bool) or not isinstance(min_count, int):
        raise ConfigError(f"Minimum count must be an integer, got {min_count!r}")
    if min_count < 0:
        raise ConfigError(f"Minimum count must not be negative, got {min_count}")

    dot_url = _pick(cli_args.dot_url, yaml_data, "dot_url", None)

    return ReportConfig(
        report=report,
        min_count=min_count,
        dot_with_counts=_flag(cli_args.dot_with_counts, yaml_data, "dot_with_counts"),
        dot_url=str(dot_url) if dot_url else None,
        dot_linked_only=_flag(cli_args.dot_linked_only, yaml_data, "dot_linked_only"),
    )
