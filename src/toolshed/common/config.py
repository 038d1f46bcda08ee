"""Client settings: optional YAML file, overridden by environment variables."""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from toolshed.common.templates import DEFAULT_TEMPLATE, load_template

LOGGER = logging.getLogger("toolshed.config")

DEFAULT_CFG_PATH = "configs/settings.yaml"
DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com"
DEFAULT_MODEL = "gemini-2.5-flash-preview-09-2025"
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class ClientSettings:
    """Connection settings for the translation provider."""
    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    model: str = DEFAULT_MODEL
    timeout: float = DEFAULT_TIMEOUT
    prompt_template: str = DEFAULT_TEMPLATE

    @property
    def endpoint(self) -> str:
        return f"{self.base_url.rstrip('/')}/v1beta/models/{self.model}:generateContent"


def load_cfg(path: str) -> dict[str, Any]:
    """Read a YAML settings file; a missing file yields an empty mapping."""
    if not Path(path).exists():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return data or {}


def load_settings(cfg_path: str | None = None) -> ClientSettings:
    """
    Build client settings from YAML and the environment.

    Args:
        cfg_path: YAML config path. Defaults to TOOLSHED_CONFIG or configs/settings.yaml.
    """
    path = cfg_path or os.getenv("TOOLSHED_CONFIG", DEFAULT_CFG_PATH)
    cfg = load_cfg(path)

    template_path = os.getenv("TOOLSHED_PROMPT_TEMPLATE")
    if not template_path and cfg.get("prompt_template_path"):
        # relative to the YAML file, not the working directory
        template_path = str(Path(path).parent / cfg["prompt_template_path"])
    template = load_template(template_path) if template_path else DEFAULT_TEMPLATE

    settings = ClientSettings(
        api_key=os.getenv("GEMINI_API_KEY", str(cfg.get("api_key") or "")),
        base_url=os.getenv("GEMINI_BASE_URL", str(cfg.get("base_url", DEFAULT_BASE_URL))),
        model=os.getenv("GEMINI_MODEL", str(cfg.get("model", DEFAULT_MODEL))),
        timeout=float(os.getenv("GEMINI_TIMEOUT", cfg.get("timeout", DEFAULT_TIMEOUT))),
        prompt_template=template,
    )
    LOGGER.debug("Loaded settings from %s: model=%s base_url=%s", path, settings.model, settings.base_url)
    return settings
