"""Config reading and writing for featurewiki."""

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Optional

import tomli

DEFAULT_CONFIG_FILE = "featurewiki.toml"


class ConfigError(Exception):
    """Raised when the config file cannot be read or holds bad values."""


@dataclass
class Config:
    repository_url: Optional[str] = None
    branch: str = "master"
    features_dir: str = "features"
    identifier: Optional[str] = None
    annotate_results: bool = False

    def as_dict(self) -> dict:
        return asdict(self)


# Expected value type for each key in the TOML file.
_FIELD_TYPES = {
    "repository_url": str,
    "branch": str,
    "features_dir": str,
    "identifier": str,
    "annotate_results": bool,
}


# ---------------------------------------------------------------------------
# TOML helpers
# ---------------------------------------------------------------------------


_TOML_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\f": "\\f",
    "\r": "\\r",
}


def _toml_char(char: str) -> str:
    if char in _TOML_ESCAPES:
        return _TOML_ESCAPES[char]
    # Remaining control characters are not allowed raw in a basic string.
    if ord(char) < 0x20 or ord(char) == 0x7F:
        return f"\\u{ord(char):04X}"
    return char


def _toml_value(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    escaped = "".join(_toml_char(char) for char in str(value))
    return f'"{escaped}"'


def _validate(path: Path, data: dict) -> dict:
    for key, value in data.items():
        expected = _FIELD_TYPES.get(key)
        if expected is None:
            raise ConfigError(f"{path}: unknown config key '{key}'")
        if not isinstance(value, expected):
            raise ConfigError(
                f"{path}: '{key}' must be a {expected.__name__}, "
                f"got {type(value).__name__}"
            )
    return data


# ---------------------------------------------------------------------------
# Public interface
# ---------------------------------------------------------------------------


def load_config(path: Path) -> Config:
    """
    Read a featurewiki TOML config.

    A missing file yields the defaults, so the dependency checker can report
    whatever still needs to be set.
    """
    path = Path(path)
    if not path.exists():
        return Config()

    try:
        with open(path, "rb") as f:
            data = tomli.load(f)
    except tomli.TOMLDecodeError as exc:
        raise ConfigError(f"{path}: invalid TOML ({exc})") from exc
    except OSError as exc:
        raise ConfigError(f"{path}: cannot be read ({exc.strerror})") from exc

    return Config(**_validate(path, data))


def write_config(path: Path, config: Config) -> None:
    """Write config to path, skipping unset fields."""
    path = Path(path)
    lines = [
        f"{field.name} = {_toml_value(getattr(config, field.name))}"
        for field in fields(config)
        if getattr(config, field.name) is not None
    ]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    print(f"Wrote {path}")
