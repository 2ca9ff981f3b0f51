"""Configuration loading: settings files, environment, credentials and cache paths.

This module turns serialisable :class:`~contentful_core.models.ClientSettings`
into the frozen :class:`~contentful_core.models.ClientConfig` a client is
built from:

* **Settings files** -- :func:`load_settings` reads ``.json``, ``.yaml`` or
  ``.yml`` files (JSON is tried first, YAML second).
* **Environment** -- :func:`settings_from_env` reads the ``CONTENTFUL_*``
  variables.
* **Credentials** -- :func:`resolve_credential` turns a source descriptor
  (``env:VAR``, ``file:/path`` or a literal token) into the token.
* **Cache directory** -- :func:`get_cache_dir` follows the XDG Base
  Directory spec on Linux/BSD and uses ``~/.contentful-core/cache``
  elsewhere.
* **Assembly** -- :func:`build_config` combines the above.
"""

from __future__ import annotations

import json
import os
import platform
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml
from pydantic import ValidationError

from contentful_core.cache.disk import DiskCache
from contentful_core.exceptions import ConfigError
from contentful_core.log.logger import NoticeLogger
from contentful_core.models import ApiMode, ClientConfig, ClientSettings, space_base_uri

_APP_NAME = "contentful-core"

ENV_TOKEN = "CONTENTFUL_ACCESS_TOKEN"
ENV_SPACE_ID = "CONTENTFUL_SPACE_ID"
ENV_BASE_URI = "CONTENTFUL_BASE_URI"
ENV_API = "CONTENTFUL_API"
ENV_TIMEOUT = "CONTENTFUL_TIMEOUT"
ENV_CACHE_DIR = "CONTENTFUL_CACHE_DIR"
ENV_CACHE_ENABLED = "CONTENTFUL_CACHE_ENABLED"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


# --- Paths ---


def _is_xdg_platform() -> bool:
    """Return True if the platform supports XDG Base Directory spec (Linux/FreeBSD)."""
    return platform.system() == "Linux" or platform.system().endswith("BSD")


def get_cache_dir() -> Path:
    """Return the cache directory, creating it if necessary.

    On Linux/BSD: ``$XDG_CACHE_HOME/contentful-core/`` (default
    ``~/.cache/contentful-core/``).  On macOS/Windows:
    ``~/.contentful-core/cache/``.
    """
    if _is_xdg_platform():
        env_value = os.environ.get("XDG_CACHE_HOME", "")
        base = Path(env_value) if env_value else Path.home() / ".cache"
        path = base / _APP_NAME
    else:
        path = Path.home() / f".{_APP_NAME}" / "cache"
    path.mkdir(parents=True, exist_ok=True)
    return path


# --- Credentials ---


def resolve_credential(source: str, environ: Optional[Mapping[str, str]] = None) -> str:
    """Resolve a credential from its source descriptor.

    Supported formats:
        - ``"env:VAR_NAME"`` -- reads ``VAR_NAME`` from the environment
        - ``"file:/path/to/file"`` -- reads file content, stripped of whitespace
        - anything else -- used as the token itself

    Raises:
        ConfigError: If the source can't be resolved or resolves to an
            empty string.
    """
    env = os.environ if environ is None else environ

    if source.startswith("env:"):
        var_name = source[4:]
        value = env.get(var_name)
        if not value:
            raise ConfigError(
                f"Environment variable '{var_name}' is not set (source: {source})"
            )
        return value

    if source.startswith("file:"):
        path = Path(source[5:]).expanduser()
        if not path.is_file():
            raise ConfigError(f"Credential file not found: {path} (source: {source})")
        try:
            value = path.read_text(encoding="utf-8").strip()
        except OSError as exc:
            raise ConfigError(f"Cannot read credential file {path}: {exc}") from exc
        if not value:
            raise ConfigError(f"Credential file is empty: {path}")
        return value

    if not source:
        raise ConfigError("No credential configured")
    return source


# --- Settings ---


def load_settings(path: str | Path) -> ClientSettings:
    """Load :class:`ClientSettings` from a JSON or YAML file.

    Raises:
        ConfigError: If the file is missing, unparsable, or fails validation.
    """
    file_path = Path(path).expanduser()
    if not file_path.is_file():
        raise ConfigError(f"Settings file not found: {file_path}")
    try:
        content = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read settings file {file_path}: {exc}") from exc

    data = _parse_content(content, yaml_only=file_path.suffix.lower() in (".yaml", ".yml"))
    try:
        return ClientSettings.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid settings in {file_path}: {exc}") from exc


def _parse_content(content: str, yaml_only: bool = False) -> dict[str, Any]:
    """Parse *content* as JSON, falling back to YAML."""
    if not yaml_only:
        try:
            result = json.loads(content)
        except json.JSONDecodeError:
            pass
        else:
            return _require_mapping(result)

    try:
        result = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Settings are neither valid JSON nor YAML: {exc}") from exc
    return _require_mapping(result)


def _require_mapping(result: Any) -> dict[str, Any]:
    if not isinstance(result, dict):
        kind = type(result).__name__ if result is not None else "empty document"
        raise ConfigError(f"Settings must be a JSON/YAML object (got {kind})")
    return result


def settings_from_env(environ: Optional[Mapping[str, str]] = None) -> ClientSettings:
    """Build :class:`ClientSettings` from ``CONTENTFUL_*`` environment variables.

    The token is always read lazily as ``env:CONTENTFUL_ACCESS_TOKEN``.

    Raises:
        ConfigError: If a variable holds an invalid value.
    """
    env = os.environ if environ is None else environ
    data: dict[str, Any] = {"token": f"env:{ENV_TOKEN}"}

    if env.get(ENV_SPACE_ID):
        data["space_id"] = env[ENV_SPACE_ID]
    if env.get(ENV_BASE_URI):
        data["base_uri"] = env[ENV_BASE_URI]
    if env.get(ENV_API):
        data["api"] = env[ENV_API].upper()
    if env.get(ENV_TIMEOUT):
        data["timeout"] = env[ENV_TIMEOUT]

    cache: dict[str, Any] = {}
    if env.get(ENV_CACHE_DIR):
        cache["directory"] = env[ENV_CACHE_DIR]
        cache["enabled"] = True
    if env.get(ENV_CACHE_ENABLED):
        cache["enabled"] = env[ENV_CACHE_ENABLED].strip().lower() in _TRUTHY
    if cache:
        data["cache"] = cache

    try:
        return ClientSettings.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid CONTENTFUL_* environment: {exc}") from exc


# --- Assembly ---


def build_config(
    settings: ClientSettings,
    logger: Optional[NoticeLogger] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ClientConfig:
    """Resolve *settings* into a frozen :class:`ClientConfig`.

    Args:
        settings: Loaded settings.
        logger: Receiver of transfer statistics, if any.
        environ: Environment used for ``env:`` credentials (defaults to
            :data:`os.environ`).

    When caching is enabled the returned config holds a new
    :class:`DiskCache`.  The caller owns it: clients built from the config
    share the cache and never close it, so call ``config.cache.close()``
    once they are done.

    Raises:
        ConfigError: If the credential can't be resolved or neither
            ``base_uri`` nor ``space_id`` is set.
    """
    token = resolve_credential(settings.token, environ)

    if settings.base_uri:
        base_uri = settings.base_uri
    elif settings.space_id:
        base_uri = space_base_uri(ApiMode(settings.api), settings.space_id)
    else:
        raise ConfigError("Either 'base_uri' or 'space_id' must be configured")

    cache = None
    if settings.cache.enabled:
        directory = (
            Path(settings.cache.directory).expanduser()
            if settings.cache.directory
            else get_cache_dir()
        )
        cache = DiskCache(directory)

    try:
        return ClientConfig(
            token=token,
            base_uri=base_uri,
            api=settings.api,
            logger=logger,
            cache=cache,
            timeout=settings.timeout,
            verify_ssl=settings.verify_ssl,
        )
    except ValidationError as exc:
        if cache is not None:
            cache.close()
        raise ConfigError(f"Invalid client configuration: {exc}") from exc
