#!/usr/bin/env python3
# ======================================================================
#  Config Service - Configuration loading and validation
#  - Loads config from defaults, YAML, env vars and CLI overrides
#  - Produces the frozen TimingsConfig handed to the pipeline
# ======================================================================

from __future__ import annotations

import copy
import logging
import os
from collections.abc import Mapping
from typing import Any

import yaml

from cmdtimes.helpers.dto.config_dto import TimingsConfig
from cmdtimes.helpers.exceptions import ConfigurationError
from cmdtimes.helpers.logging_helper import resolve_log_level
from cmdtimes.services.worker_pool_svc import default_worker_count

CONFIG_ENV_VAR = "CMDTIMES_CONFIG"

# Environment variable -> dotted config key
ENV_OVERRIDES: dict[str, str] = {
    "CMDTIMES_WORKERS": "workers",
    "CMDTIMES_MAX_LINES": "report.max_lines",
    "CMDTIMES_MAX_COLUMNS": "report.max_columns",
    "CMDTIMES_MAX_LINE_LENGTH": "input.max_line_length",
    "CMDTIMES_LOG_LEVEL": "logging.level",
}


class ConfigService:
    """
    Service for composing and validating configuration.

    Sources, lowest precedence first:
      1) Built-in defaults
      2) ./config/cmdtimes.yaml (if present)
      3) $CMDTIMES_CONFIG (if set)
      4) Explicit config_path (must exist)
      5) Environment variables (CMDTIMES_*)
      6) Overrides dict (command-line flags)
    """

    def __init__(
        self,
        config_path: str | None = None,
        environ: Mapping[str, str] | None = None,
        cwd: str | None = None,
    ) -> None:
        """
        Args:
            config_path: Explicit YAML file (e.g. from --config)
            environ: Environment mapping (defaults to os.environ)
            cwd: Directory searched for config/cmdtimes.yaml (defaults to os.getcwd())
        """
        self.config_path = config_path
        self.environ = os.environ if environ is None else environ
        self.cwd = cwd
        self._config: dict[str, Any] | None = None
        self._logger = logging.getLogger(__name__)

    def get_config(self, overrides: dict[str, Any] | None = None) -> dict[str, Any]:
        """
        Get the composed configuration dict.

        Args:
            overrides: Nested dict merged last (None values are ignored)

        Raises:
            ConfigurationError: If an explicit config file is missing or invalid
        """
        if overrides:
            return self._compose(overrides)
        if self._config is None:
            self._config = self._compose()
        return self._config

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a config value by dotted path.

        Example:
            >>> ConfigService(environ={}).get("report.max_columns")
            200
        """
        node: Any = self.get_config()
        for part in key_path.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def make_timings_config(self, overrides: dict[str, Any] | None = None) -> TimingsConfig:
        """
        Build a validated TimingsConfig.

        This is the boundary where raw config values are checked; nothing
        downstream reads configuration from anywhere else.

        Raises:
            ConfigurationError: If any value is missing, mistyped or out of range
        """
        cfg = self.get_config(overrides)

        workers = cfg.get("workers")
        worker_count = default_worker_count() if workers is None else self._int(workers, "workers", minimum=1)

        level = self._section(cfg, "logging").get("level", "WARNING")
        try:
            resolve_log_level(str(level))
        except ValueError as e:
            raise ConfigurationError(str(e)) from e

        report = self._section(cfg, "report")
        return TimingsConfig(
            worker_count=worker_count,
            max_lines=self._int(report.get("max_lines"), "report.max_lines", minimum=0),
            max_columns=self._int(report.get("max_columns"), "report.max_columns"),
            max_line_length=self._int(
                self._section(cfg, "input").get("max_line_length"), "input.max_line_length", minimum=1
            ),
            log_level=str(level).upper(),
        )

    # ----------------------------------------------------------------------
    # Private composition logic
    # ----------------------------------------------------------------------

    def _compose(self, overrides: dict[str, Any] | None = None) -> dict[str, Any]:
        cfg = self._default_config()

        repo_cfg = os.path.join(self.cwd or os.getcwd(), "config", "cmdtimes.yaml")
        self._deep_merge(cfg, self._load_yaml(repo_cfg))

        env_path = self.environ.get(CONFIG_ENV_VAR)
        if env_path:
            self._deep_merge(cfg, self._load_yaml(env_path))

        if self.config_path:
            self._deep_merge(cfg, self._load_yaml(self.config_path, required=True))

        self._apply_env_overrides(cfg)

        if overrides:
            self._deep_merge(cfg, self._drop_none(overrides))

        self._logger.debug("compose() loaded config: %s", cfg)
        return cfg

    def _default_config(self) -> dict[str, Any]:
        """
        Base defaults; all sections present so no KeyErrors downstream.
        """
        return {
            # None = one worker per CPU
            "workers": None,
            "report": {
                "max_lines": 15,
                "max_columns": 200,
            },
            "input": {
                # Matches the classic 64 KiB scanner token limit
                "max_line_length": 64 * 1024,
            },
            "logging": {
                "level": "WARNING",
            },
        }

    def _deep_merge(self, a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
        """
        Recursively merge dict b into dict a (mutates a, returns it).
        """
        for k, v in b.items():
            if isinstance(v, dict) and isinstance(a.get(k), dict):
                self._deep_merge(a[k], v)
            else:
                a[k] = copy.deepcopy(v)
        return a

    def _drop_none(self, d: dict[str, Any]) -> dict[str, Any]:
        return {k: self._drop_none(v) if isinstance(v, dict) else v for k, v in d.items() if v is not None}

    def _load_yaml(self, path: str, required: bool = False) -> dict[str, Any]:
        """
        Load a YAML mapping.

        Optional files return {} if missing or invalid; a required file that
        is missing or invalid raises ConfigurationError.
        """
        if not os.path.exists(path):
            if required:
                raise ConfigurationError(f"config file not found: {path}")
            return {}
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            if required:
                raise ConfigurationError(f"failed to read config file {path}: {e}") from e
            self._logger.warning("Ignoring unreadable config file %s: %s", path, e)
            return {}
        if not isinstance(data, dict):
            if required:
                raise ConfigurationError(f"config file {path} must contain a mapping")
            self._logger.warning("Ignoring config file %s: top level is not a mapping", path)
            return {}
        return data

    def _apply_env_overrides(self, cfg: dict[str, Any]) -> None:
        """
        Support environment overrides of the form:
          CMDTIMES_WORKERS=4
          CMDTIMES_MAX_COLUMNS=120
          CMDTIMES_LOG_LEVEL=info
        """
        for env_key, key_path in ENV_OVERRIDES.items():
            raw = self.environ.get(env_key)
            if raw is None or raw == "":
                continue

            val: Any = raw
            if key_path != "logging.level":
                try:
                    val = int(raw)
                except ValueError as e:
                    raise ConfigurationError(f"{env_key} must be an integer, got {raw!r}") from e

            node = cfg
            *parents, leaf = key_path.split(".")
            for part in parents:
                node = node.setdefault(part, {})
            node[leaf] = val

    def _section(self, cfg: dict[str, Any], name: str) -> dict[str, Any]:
        section = cfg.get(name, {})
        if not isinstance(section, dict):
            raise ConfigurationError(f"config section '{name}' must be a mapping, got {section!r}")
        return section

    def _int(self, value: Any, key: str, minimum: int | None = None) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigurationError(f"{key} must be an integer, got {value!r}")
        if minimum is not None and value < minimum:
            raise ConfigurationError(f"{key} must be >= {minimum}, got {value}")
        return value
