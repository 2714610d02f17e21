"""Client configuration loading and credential source resolution.

Precedence (high to low):

1. Explicit keyword overrides passed to :func:`load_config` (the CLI flags).
2. Environment variables ``EDGECLIENT_BASE_URL``, ``EDGECLIENT_TIMEOUT``,
   ``EDGECLIENT_VERIFY_SSL`` and ``EDGECLIENT_TOKEN_SOURCE``.
3. The JSON config file (``--config`` path, else ``./edgeclient.json``).
4. Defaults from :class:`~edgeclient.models.ClientConfig`.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Optional

from edgeclient.exceptions import ConfigError
from edgeclient.models import ClientConfig

_PROJECT_CONFIG_FILENAME = "edgeclient.json"

ENV_BASE_URL = "EDGECLIENT_BASE_URL"
ENV_TIMEOUT = "EDGECLIENT_TIMEOUT"
ENV_VERIFY_SSL = "EDGECLIENT_VERIFY_SSL"
ENV_TOKEN_SOURCE = "EDGECLIENT_TOKEN_SOURCE"

_FALSE_VALUES = {"0", "false", "no", "off"}


def load_config_file(path: Optional[str | Path] = None) -> dict[str, Any]:
    """Read the JSON config file.

    Args:
        path: Explicit file path. When ``None``, ``./edgeclient.json`` is
            used if it exists.

    Returns:
        The parsed JSON object, or an empty dict when no default file exists.

    Raises:
        ConfigError: If an explicit *path* is missing, or the file is not a
            JSON object.
    """
    if path is None:
        candidate = Path.cwd() / _PROJECT_CONFIG_FILENAME
        if not candidate.is_file():
            return {}
    else:
        candidate = Path(path).expanduser()
        if not candidate.is_file():
            raise ConfigError(f"Config file not found: {candidate}")
    try:
        data = json.loads(candidate.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError) as exc:
        raise ConfigError(f"Invalid config file at {candidate}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Config file at {candidate} must contain a JSON object")
    return data


def load_config(
    path: Optional[str | Path] = None,
    base_url: Optional[str] = None,
    timeout: Optional[float] = None,
) -> ClientConfig:
    """Resolve the effective :class:`~edgeclient.models.ClientConfig`.

    Raises:
        ConfigError: If the file or an environment value fails validation.
    """
    data = load_config_file(path)

    env_base_url = os.environ.get(ENV_BASE_URL)
    if env_base_url:
        data["base_url"] = env_base_url
    env_timeout = os.environ.get(ENV_TIMEOUT)
    if env_timeout:
        data["timeout"] = env_timeout
    env_verify = os.environ.get(ENV_VERIFY_SSL)
    if env_verify:
        data["verify_ssl"] = env_verify.strip().lower() not in _FALSE_VALUES
    env_token = os.environ.get(ENV_TOKEN_SOURCE)
    if env_token:
        data["auth"] = {"type": "bearer", "source": env_token}

    if base_url is not None:
        data["base_url"] = base_url
    if timeout is not None:
        data["timeout"] = timeout

    try:
        return ClientConfig.model_validate(data)
    except ValueError as exc:
        raise ConfigError(f"Invalid client configuration: {exc}") from exc


def resolve_credential(source: str) -> str:
    """Resolve a credential from its source descriptor.

    Supported formats:
        - ``"env:VAR_NAME"`` -- reads ``os.environ["VAR_NAME"]``
        - ``"file:/path/to/file"`` -- reads file content, stripped of whitespace
        - ``"value:TOKEN"`` -- the literal token

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

    if source.startswith("value:"):
        return source[6:]

    raise ConfigError(
        f"Unknown credential source '{source}'. Use env:VAR, file:/path, or value:TOKEN"
    )
