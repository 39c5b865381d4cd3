"""YAML config loading with env var expansion."""

import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from refcheck.errors import ConfigurationError

from .models import RefcheckConfig


def load_config(cli_path: str | None = None) -> RefcheckConfig:
    """Load config with resolution order: CLI > project-local > user-global > defaults."""
    if cli_path and not Path(cli_path).is_file():
        raise ConfigurationError(f"Config file not found: {cli_path}")

    config_paths = [
        Path(cli_path) if cli_path else None,
        Path("./refcheck.yaml"),
        Path.home() / ".refcheck" / "config.yaml",
    ]

    for path in config_paths:
        if path and path.exists():
            try:
                with open(path) as f:
                    raw = yaml.safe_load(f)
                if raw is None:
                    continue
                if not isinstance(raw, dict):
                    raise ConfigurationError(f"Invalid config in {path}: expected a mapping")
                raw = _expand_env_vars(raw)
                return RefcheckConfig(**raw)
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e
            except ValidationError as e:
                raise ConfigurationError(f"Invalid config in {path}: {e}") from e

    return RefcheckConfig()


def _expand_env_vars(obj: object) -> object:
    """Recursively expand ${VAR} references in strings."""
    if isinstance(obj, str):
        return re.sub(r"\$\{(\w+)\}", lambda m: os.environ.get(m.group(1), ""), obj)
    elif isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(v) for v in obj]
    return obj


# Default YAML template for `refcheck config init`
DEFAULT_CONFIG_TEMPLATE = """\
# refcheck.yaml

# Number of concurrent verification workers per folder
workers: 4

# Regular expressions searched anywhere in a file's full path.
# Matching files are skipped and not counted.
exclude: []
#  - "\\\\.tmp$"
#  - "(^|/)locks/"

# Named exclusion templates (restic | darwin | linux | windows | custom)
# Defaults to restic plus the current platform.
# templates: ["restic", "linux"]

# Extra templates, usable by name in `templates` or `--template`
# custom_templates:
#   borg: ["(^|/)README$", "(^|/)nonce$"]

# Output
output:
  format: "table"              # table | json
  fail_on_corrupted: false     # exit 1 if any file is corrupted, invalid or unreadable

# Logging
log_level: "info"              # debug | info | warn | error
log_format: "text"             # text | json
"""
