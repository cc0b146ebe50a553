"""Configuration management with XDG paths, atomic writes, and precedence resolution.

This module handles all persistent configuration for ros7api:

* **Directory layout** -- XDG Base Directory compliant on Linux/BSD,
  ``~/.ros7api/`` on macOS and Windows. See :func:`get_config_dir`,
  :func:`get_data_dir`, :func:`get_profiles_dir`.
* **Device profiles** -- One JSON file per RouterOS device, each
  deserialised into a :class:`~ros7api.models.DeviceProfile`. Managed via
  :func:`load_profile`, :func:`save_profile`, :func:`list_profiles`.
* **Precedence resolution** -- :func:`resolve_profile` picks the active
  profile from an explicit name, environment variables, project-local
  config, or the only profile on disk.
* **Credential resolution** -- :func:`resolve_credential` reads secrets
  from env vars, files, or interactive prompts.

All file writes (profiles and generated modules alike) go through
:func:`atomic_write`, a temp-file-then-rename strategy.
"""

from __future__ import annotations

import getpass
import json
import os
import platform
import sys
import tempfile
from pathlib import Path
from typing import Any, Optional

from ros7api.exceptions import ConfigError
from ros7api.models import DeviceProfile

_APP_NAME = "ros7api"
_PROJECT_CONFIG_FILENAME = "ros7api.json"

ENV_PROFILE = "ROS7API_PROFILE"
ENV_ADDRESS = "ROS7API_ADDRESS"


# --- XDG path resolution ---


def _is_xdg_platform() -> bool:
    """Return True if the platform follows the XDG Base Directory layout (Linux/BSD)."""
    return platform.system() == "Linux" or platform.system().endswith("BSD")


def _fallback_base_dir() -> Path:
    """Fallback base directory for non-XDG platforms (macOS, Windows)."""
    return Path.home() / f".{_APP_NAME}"


def _xdg_base(env_var: str, default_segments: tuple[str, ...]) -> Path:
    """Resolve an XDG base directory from an env var with fallback segments under $HOME."""
    env_value = os.environ.get(env_var, "")
    if env_value:
        return Path(env_value)
    base = Path.home()
    for seg in default_segments:
        base = base / seg
    return base


def get_config_dir() -> Path:
    """Return the configuration directory, creating it if necessary.

    On Linux/BSD: ``$XDG_CONFIG_HOME/ros7api/`` (default ``~/.config/ros7api/``).
    On macOS/Windows: ``~/.ros7api/``.
    """
    if _is_xdg_platform():
        path = _xdg_base("XDG_CONFIG_HOME", (".config",)) / _APP_NAME
    else:
        path = _fallback_base_dir()
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_data_dir() -> Path:
    """Return the data directory (crash logs), creating it if necessary.

    On Linux/BSD: ``$XDG_DATA_HOME/ros7api/`` (default ``~/.local/share/ros7api/``).
    On macOS/Windows: ``~/.ros7api/logs/``.
    """
    if _is_xdg_platform():
        path = _xdg_base("XDG_DATA_HOME", (".local", "share")) / _APP_NAME
    else:
        path = _fallback_base_dir() / "logs"
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_profiles_dir() -> Path:
    """Return the profiles directory (``<config_dir>/profiles/``), creating it if necessary."""
    path = get_config_dir() / "profiles"
    path.mkdir(parents=True, exist_ok=True)
    return path


# --- Atomic file writes ---


def atomic_write(path: Path, data: str) -> None:
    """Write data to file atomically using temp file + rename.

    The temporary file is created in the same directory as *path* so that
    ``os.replace`` is an atomic rename on POSIX systems. On any failure the
    temp file is cleaned up and *path* is left as it was.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    fd = None
    tmp_path: Optional[str] = None
    try:
        fd = tempfile.NamedTemporaryFile(
            mode="w",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
        )
        tmp_path = fd.name
        fd.write(data)
        fd.flush()
        os.fsync(fd.fileno())
        fd.close()
        fd = None  # prevent double-close below
        os.replace(tmp_path, path)
    except BaseException:
        if fd is not None:
            fd.close()
        if tmp_path is not None:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
        raise


# --- Device profiles ---


def _profile_path(name: str) -> Path:
    return get_profiles_dir() / f"{name}.json"


def _read_json(path: Path, what: str) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except ValueError as exc:
        raise ConfigError(f"Invalid {what} at {path}: {exc}") from exc


def list_profiles() -> list[str]:
    """Names of the saved device profiles, sorted."""
    return sorted(p.stem for p in get_profiles_dir().glob("*.json") if p.is_file())


def load_profile(name: str) -> DeviceProfile:
    """Read the saved profile *name*.

    Raises:
        ConfigError: If there is no such profile or its file does not hold a
            valid :class:`~ros7api.models.DeviceProfile`.
    """
    path = _profile_path(name)
    if not path.is_file():
        raise ConfigError(f"Profile '{name}' not found at {path}")
    data = _read_json(path, f"profile '{name}'")
    try:
        return DeviceProfile.model_validate(data)
    except ValueError as exc:
        raise ConfigError(f"Invalid profile '{name}' at {path}: {exc}") from exc


def save_profile(profile: DeviceProfile) -> None:
    """Write *profile* to ``<profiles dir>/<name>.json``, replacing any previous one."""
    text = json.dumps(profile.model_dump(mode="json"), indent=2) + "\n"
    atomic_write(_profile_path(profile.name), text)


def load_project_config() -> Optional[dict[str, Any]]:
    """Read ``./ros7api.json``, or return ``None`` when there is none.

    A repository uses it to pin the device its scripts talk to::

        {"default_profile": "core-router"}

    Raises:
        ConfigError: If the file is not a JSON object.
    """
    path = Path.cwd() / _PROJECT_CONFIG_FILENAME
    if not path.is_file():
        return None
    data = _read_json(path, "project config")
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid project config at {path}: expected a JSON object")
    return data


def _selected_profile_name(name: Optional[str]) -> Optional[str]:
    if name:
        return name
    if os.environ.get(ENV_PROFILE):
        return os.environ[ENV_PROFILE]
    project = load_project_config() or {}
    if project.get("default_profile"):
        return project["default_profile"]
    saved = list_profiles()
    return saved[0] if len(saved) == 1 else None


def resolve_profile(name: Optional[str] = None) -> DeviceProfile:
    """Pick and load the device profile to connect with.

    The first of these wins: *name*, ``ROS7API_PROFILE``, ``default_profile``
    in ``./ros7api.json``, and finally the saved profile when there is exactly
    one. ``ROS7API_ADDRESS``, when set, replaces the loaded profile's address
    (the file on disk is left alone).

    This is what :meth:`ros7api.client.Client.from_profile` calls when it is
    not handed a profile.

    Raises:
        ConfigError: If nothing selects a profile or loading it fails.
    """
    selected = _selected_profile_name(name)
    if selected is None:
        raise ConfigError(
            f"No device profile selected: pass a name, set {ENV_PROFILE}, "
            f"or add default_profile to ./{_PROJECT_CONFIG_FILENAME}"
        )
    profile = load_profile(selected)
    if os.environ.get(ENV_ADDRESS):
        profile.address = os.environ[ENV_ADDRESS]
    return profile


# --- Credential source resolution ---


def resolve_credential(source: str) -> str:
    """Resolve a credential from its source descriptor.

    Supported formats:
        - ``"env:VAR_NAME"`` -- reads ``os.environ["VAR_NAME"]``
        - ``"file:/path/to/file"`` -- reads file content, stripped of whitespace
        - ``"prompt"`` -- prompts user interactively (requires a TTY)

    Raises:
        ConfigError: If the source can't be resolved.
    """
    if source.startswith("env:"):
        var_name = source[4:]
        value = os.environ.get(var_name)
        if value is None:
            raise ConfigError(
                f"Environment variable '{var_name}' is not set (source: {source})"
            )
        return value

    if source.startswith("file:"):
        path = Path(source[5:]).expanduser()
        if not path.is_file():
            raise ConfigError(f"Credential file not found: {path} (source: {source})")
        try:
            return path.read_text(encoding="utf-8").strip()
        except OSError as exc:
            raise ConfigError(f"Cannot read credential file {path}: {exc}") from exc

    if source == "prompt":
        if not sys.stdin.isatty():
            raise ConfigError(
                "Cannot prompt for credentials: stdin is not a TTY (source: prompt)"
            )
        return getpass.getpass("RouterOS password: ")

    raise ConfigError(f"Unknown credential source format: {source}")
