"""Unified configuration layer for the SDK.

Sources are merged in a predictable order (later wins):
    1. Built-in defaults (:mod:`llm_sdk.config.defaults`)
    2. Optional config file (JSON or YAML) pointed to by ``LLM_SDK_CONFIG_FILE``
    3. Environment variables
    4. In-code overrides passed to :func:`get_sdk_config` (``None`` values ignored)

Environment variables
---------------------
``OPENAI_API_KEY`` (token), ``LLM_SDK_BASE_URL``, ``LLM_SDK_MAX_RETRIES``,
``LLM_SDK_TIMEOUT_SECONDS``.

Config file example::

    base_url: https://api.openai.com/v1
    max_retries: 5
    timeout: 20
    token: ${OPENAI_API_KEY}

Numeric values that fail to parse are ignored so the previous layer stays in
effect. A missing token resolves to ``""``, which disables the auth header.
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .defaults import DEFAULT_BASE_URL, DEFAULT_MAX_RETRIES, REQUEST_TIMEOUT_SECONDS

DEFAULTS: Dict[str, Any] = {
    "token": "",
    "base_url": DEFAULT_BASE_URL,
    "max_retries": DEFAULT_MAX_RETRIES,
    "timeout": REQUEST_TIMEOUT_SECONDS,
}

ENV_FIELD_MAP = {
    "token": "OPENAI_API_KEY",  # pragma: allowlist secret - env var name, not a secret
    "base_url": "LLM_SDK_BASE_URL",
    "max_retries": "LLM_SDK_MAX_RETRIES",
    "timeout": "LLM_SDK_TIMEOUT_SECONDS",
}

_COERCE = {
    "max_retries": int,
    "timeout": float,
}


def _load_config_file() -> Dict[str, Any]:
    path = os.getenv("LLM_SDK_CONFIG_FILE")
    if not path:
        return {}
    p = Path(path)
    if not p.is_file():
        return {}
    text = p.read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except ValueError:
        data = yaml.safe_load(text)
    if not isinstance(data, dict):
        return {}
    return {k: os.path.expandvars(v) if isinstance(v, str) else v for k, v in data.items() if k in DEFAULTS}


def _env_overrides() -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for field, var in ENV_FIELD_MAP.items():
        val = os.getenv(var)
        if val is not None:
            out[field] = val
    return out


def _merge(cfg: Dict[str, Any], layer: Dict[str, Any]) -> None:
    for key, value in layer.items():
        if value is None:
            continue
        coerce = _COERCE.get(key)
        if coerce is not None:
            try:
                value = coerce(value)
            except (TypeError, ValueError):
                continue
            if value < 0 or (key == "timeout" and value == 0):
                continue
        cfg[key] = value


def get_sdk_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return the merged SDK configuration.

    Keys: ``token``, ``base_url``, ``max_retries``, ``timeout``.
    """
    cfg: Dict[str, Any] = dict(DEFAULTS)
    _merge(cfg, _load_config_file())
    _merge(cfg, _env_overrides())
    if overrides:
        _merge(cfg, overrides)
    return cfg


__all__ = ["get_sdk_config", "DEFAULTS", "ENV_FIELD_MAP"]
