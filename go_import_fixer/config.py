"""Resolve the organization prefix and exclusion patterns.

Values come from, in order of precedence: command-line flags, the
``GOIF_PREFIX`` environment variable (prefix only), a ``[tool.goif]`` table in
``goif.toml`` or ``.goif.toml`` at the project root, and built-in defaults.
"""

import logging
import os
from pathlib import Path
import tomllib
from typing import Any
from typing import Dict
from typing import List
from typing import Mapping
from typing import Optional

LOG = logging.getLogger(__name__)

ENV_PREFIX = "GOIF_PREFIX"
CONFIG_FILES = ("goif.toml", ".goif.toml")
DEFAULT_EXCLUDE = "vendor"


def read_config(root: str) -> Dict[str, Any]:
    """Return the ``[tool.goif]`` table of the first config file found in root."""
    root_path = Path(root)
    if root_path.is_file():
        root_path = root_path.parent

    for name in CONFIG_FILES:
        toml_path = root_path / name
        if not toml_path.is_file():
            continue
        try:
            with open(toml_path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as exc:
            LOG.warning("[%s] ignoring unreadable config: %s", toml_path, exc)
            continue
        LOG.debug("Loaded configuration from %s", toml_path)
        return data.get("tool", {}).get("goif", {})
    return {}


def split_patterns(value: Any) -> List[str]:
    """Turn a comma-separated string or a list of strings into patterns."""
    if isinstance(value, str):
        items = value.split(",")
    else:
        items = [str(item) for item in value or []]
    return [item.strip() for item in items if item.strip()]


def resolve_prefix(
    flag: Optional[str], root: str, environ: Optional[Mapping[str, str]] = None
) -> str:
    if flag:
        return flag
    if environ is None:
        environ = os.environ
    if environ.get(ENV_PREFIX):
        return environ[ENV_PREFIX]
    return str(read_config(root).get("prefix", ""))


def resolve_exclude(flag: Optional[str], root: str) -> List[str]:
    if flag is not None:
        return split_patterns(flag)
    return split_patterns(read_config(root).get("exclude", DEFAULT_EXCLUDE))
