"""Server configuration from defaults, JSON files and the environment."""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum
from typing import Any

from .parameter_parser import parse


class LogLevel(Enum):
    """Log level a server is configured with."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"


def _log_level(text: str) -> LogLevel:
    if text in ("DEBUG", "WARN", "ERROR"):
        return LogLevel(text)
    return LogLevel.INFO


def _number(data: Mapping[str, Any], key: str, default: int) -> int:
    if key not in data:
        return default
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"config value '{key}' must be a number")
    return int(value)


def _string(data: Mapping[str, Any], key: str, default: str) -> str:
    if key not in data:
        return default
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(f"config value '{key}' must be a string")
    return value


def _boolean(data: Mapping[str, Any], key: str, default: bool) -> bool:
    if key not in data:
        return default
    value = data[key]
    if not isinstance(value, bool):
        raise TypeError(f"config value '{key}' must be a boolean")
    return value


@dataclass
class ServerConfig:
    """Settings for running a server."""

    port: int = 8080
    bind_address: str = "0.0.0.0"
    max_connections: int = 1024
    connection_timeout: timedelta = field(default_factory=lambda: timedelta(seconds=60))
    thread_pool_size: int = 4
    enable_ssl: bool = False
    log_level: LogLevel = LogLevel.INFO

    def load_from_file(self, path: str | os.PathLike[str]) -> None:
        """Override settings with those present in a JSON file.

        A missing ``log_level`` resets the level to INFO.
        """
        try:
            with open(path, encoding="utf-8") as handle:
                data = json.load(handle)
        except OSError as exc:
            raise OSError(f"Could not open config file: {path}") from exc
        if not isinstance(data, dict):
            raise TypeError("config file must hold a JSON object")

        self.port = _number(data, "port", self.port)
        self.bind_address = _string(data, "bind_address", self.bind_address)
        self.max_connections = _number(data, "max_connections", self.max_connections)
        timeout = _number(data, "connection_timeout", int(self.connection_timeout.total_seconds()))
        self.connection_timeout = timedelta(seconds=timeout)
        self.thread_pool_size = _number(data, "thread_pool_size", self.thread_pool_size)
        self.enable_ssl = _boolean(data, "enable_ssl", self.enable_ssl)
        self.log_level = _log_level(_string(data, "log_level", "INFO"))

    def load_from_env(self, environ: Mapping[str, str] | None = None) -> None:
        """Override settings from ``SERVER_*`` environment variables."""
        env = os.environ if environ is None else environ
        if "SERVER_PORT" in env:
            self.port = parse(env["SERVER_PORT"], int)
        if "SERVER_BIND_ADDRESS" in env:
            self.bind_address = env["SERVER_BIND_ADDRESS"]
        if "SERVER_MAX_CONNECTIONS" in env:
            self.max_connections = parse(env["SERVER_MAX_CONNECTIONS"], int)
        if "SERVER_CONNECTION_TIMEOUT" in env:
            seconds = parse(env["SERVER_CONNECTION_TIMEOUT"], int)
            self.connection_timeout = timedelta(seconds=seconds)
        if "SERVER_THREAD_POOL_SIZE" in env:
            self.thread_pool_size = parse(env["SERVER_THREAD_POOL_SIZE"], int)
        if "SERVER_ENABLE_SSL" in env:
            self.enable_ssl = env["SERVER_ENABLE_SSL"] == "true"
        if "SERVER_LOG_LEVEL" in env:
            self.log_level = _log_level(env["SERVER_LOG_LEVEL"])

    def validate(self) -> None:
        """Raise ``ValueError`` if a setting is out of range."""
        if self.port == 0 or self.port > 65535:
            raise ValueError("Invalid port number")
        if self.max_connections == 0:
            raise ValueError("Max connections must be greater than 0")
        if self.thread_pool_size == 0:
            raise ValueError("Thread pool size must be greater than 0")