"""Configuration loading for the skill installer.

Settings come from two places, highest priority first:

1. Environment variables (``SCRUM_SKILL_GLOBAL``, ``npm_config_global``,
   ``SCRUM_SKILL_PROJECT_ROOT``, ``HOME`` / ``USERPROFILE``)
2. An optional YAML file at ``~/.config/scrum-skill/config.yaml``

Nothing outside this module reads the environment.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

import yaml

from .types import InstallConfig, InstallMode

logger = logging.getLogger(__name__)

GLOBAL_ENV = "SCRUM_SKILL_GLOBAL"
NPM_GLOBAL_ENV = "npm_config_global"
PROJECT_ROOT_ENV = "SCRUM_SKILL_PROJECT_ROOT"
LOG_LEVEL_ENV = "SCRUM_SKILL_LOG_LEVEL"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def is_truthy(value: str | None) -> bool:
    """Interpret an environment-style boolean. Unset or empty is False."""
    if value is None:
        return False
    return value.strip().lower() in _TRUTHY


def default_config_path(config_dir: Path | None = None) -> Path:
    """Return the default path for config.yaml.

    Args:
        config_dir: Override config directory. If None, uses ~/.config/scrum-skill.
    """
    if config_dir:
        return config_dir / "config.yaml"
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "scrum-skill" / "config.yaml"
    return Path.home() / ".config" / "scrum-skill" / "config.yaml"


def _read_config_file(path: Path) -> dict:
    if not path.exists():
        return {}

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except (yaml.YAMLError, OSError) as e:
        logger.warning("Ignoring unreadable config file %s: %s", path, e)
        return {}

    if not data:
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring config file %s: expected a mapping", path)
        return {}
    return data


def _home_dir(environ: Mapping[str, str]) -> Path:
    home = environ.get("HOME") or environ.get("USERPROFILE")
    if home:
        return Path(home)
    return Path.home()


def load_install_config(
    environ: Mapping[str, str] | None = None,
    path: Path | None = None,
) -> InstallConfig:
    """Build an InstallConfig from the config file and environment.

    Args:
        environ: Environment mapping. Uses os.environ if None.
        path: Path to config.yaml. Uses default_config_path() if None.

    Returns:
        The merged InstallConfig. Environment values override the file.

    Raises:
        ValueError: If the config file names an unknown install mode and
            no environment signal overrides it.
    """
    env = os.environ if environ is None else environ
    data = _read_config_file(path or default_config_path())

    # An explicit SCRUM_SKILL_GLOBAL (even "0") takes precedence over npm's flag
    signal = env.get(GLOBAL_ENV)
    if signal is None:
        signal = env.get(NPM_GLOBAL_ENV)

    if signal is not None and signal.strip():
        mode = InstallMode.GLOBAL if is_truthy(signal) else InstallMode.LOCAL
    elif data.get("mode"):
        mode = InstallMode.parse(str(data["mode"]))
    else:
        mode = InstallMode.LOCAL

    project_root: Path | None = None
    root_value = env.get(PROJECT_ROOT_ENV) or data.get("project_root")
    if root_value:
        project_root = Path(str(root_value)).expanduser()

    config = InstallConfig(home=_home_dir(env), mode=mode, project_root=project_root)
    logger.debug("Install config: %s", config)
    return config


def log_level(environ: Mapping[str, str] | None = None) -> int:
    """Return the logging level named by SCRUM_SKILL_LOG_LEVEL (default WARNING)."""
    env = os.environ if environ is None else environ
    name = env.get(LOG_LEVEL_ENV, "").strip().upper()
    level = logging.getLevelName(name) if name else logging.WARNING
    return level if isinstance(level, int) else logging.WARNING
