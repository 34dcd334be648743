from typing import Any, Dict, List, Mapping, Optional
from dataclasses import dataclass, field, replace
from pathlib import Path
import datetime
import logging

import yaml

logger = logging.getLogger(__name__)

################################################################################
# Configuration
################################################################################

DEFAULT_AUTHOR = "Lexi Rose Rogers"
DEFAULT_LICENSE = "MIT"
DEFAULT_PROJECT_NAME = "typescript-project-template"

CONFIG_FILE_NAME = ".hdr.yaml"


class ConfigError(Exception):
    """
    Raised when a configuration file cannot be read or holds invalid values.
    """


@dataclass(frozen=True)
class Configuration:
    author: str
    license: str
    year: int
    project_name: str

    def __post_init__(self):
        assert isinstance(self.author, str), f"Expected string, got {type(self.author)}"
        assert isinstance(self.license, str), f"Expected string, got {type(self.license)}"
        assert isinstance(self.year, int), f"Expected int, got {type(self.year)}"
        assert isinstance(self.project_name, str), f"Expected string, got {type(self.project_name)}"

    @classmethod
    def default(cls) -> 'Configuration':
        return cls(
            author=DEFAULT_AUTHOR,
            license=DEFAULT_LICENSE,
            year=datetime.date.today().year,
            project_name=DEFAULT_PROJECT_NAME)


@dataclass(frozen=True)
class Settings:
    """
    Everything read from a config file: the header configuration plus the
    discovery exclude patterns.
    """
    config: Configuration
    exclude: List[str] = field(default_factory=list)


################################################################################
# Loading
################################################################################

_STRING_KEYS = ('author', 'license', 'project_name')


def parse_settings(data: Mapping[str, Any] | None, base: Configuration | None = None) -> Settings:
    config = base or Configuration.default()
    if data is None:
        return Settings(config)
    if not isinstance(data, Mapping):
        raise ConfigError(f"Expected a mapping at the top level, got {type(data).__name__}")

    known = set(_STRING_KEYS) | {'year', 'exclude'}
    unknown = sorted(str(k) for k in data if k not in known)
    if unknown:
        raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

    overrides: Dict[str, Any] = {}
    for key in _STRING_KEYS:
        if key in data:
            value = data[key]
            if not isinstance(value, str):
                raise ConfigError(f"'{key}' must be a string, got {type(value).__name__}")
            overrides[key] = value

    if 'year' in data:
        year = data['year']
        # bool is an int subclass
        if isinstance(year, bool) or not isinstance(year, int):
            raise ConfigError(f"'year' must be an integer, got {type(year).__name__}")
        overrides['year'] = year

    exclude = data.get('exclude') or []
    if isinstance(exclude, str):
        exclude = [exclude]
    if not isinstance(exclude, list) or not all(isinstance(e, str) for e in exclude):
        raise ConfigError("'exclude' must be a list of patterns")

    return Settings(replace(config, **overrides), list(exclude))


def load_settings(path: Path) -> Settings:
    """
    Reads a YAML configuration file.
    """
    if not path.is_file():
        raise ConfigError(f"Configuration file not found: {path}")

    try:
        with open(path, 'rt', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    logger.debug("Loaded configuration from %s", path)
    return parse_settings(data)


def resolve_settings(root: Path, config_path: Optional[Path] = None) -> Settings:
    """
    Picks the configuration file to use: the explicit one if given, otherwise
    `.hdr.yaml` in the project root, otherwise built-in defaults.
    """
    if config_path is not None:
        return load_settings(config_path)

    candidate = root / CONFIG_FILE_NAME
    if candidate.is_file():
        return load_settings(candidate)

    logger.debug("No %s in %s, using defaults", CONFIG_FILE_NAME, root)
    return Settings(Configuration.default())
