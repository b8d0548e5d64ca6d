"""
Configuration loading for the test automation framework.

Settings come from a Java-style ``.properties`` file, can be overridden per key
through ``DEMOQA_*`` environment variables, and every key has a hard-coded
fallback so a missing file never stops a run.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict, Final, Mapping, Optional, Union, overload

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from demoqa.enums import BrowserType
from demoqa.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

CONFIG_FILE_ENV: Final[str] = "DEMOQA_CONFIG_FILE"
ENV_PREFIX: Final[str] = "DEMOQA_"
DEFAULT_CONFIG_LOCATIONS: Final[tuple] = (
    Path("config") / "config.properties",
    Path("config.properties"),
)

# Fallbacks used when a key is absent from the file and the environment
DEFAULTS: Final[Dict[str, str]] = {
    "base.url": "https://demoqa.com/",
    "browser.default": "chrome",
    "browser.headless": "false",
    "timeout.implicit": "20",
    "timeout.explicit": "20",
    "timeout.pageLoad": "60",
    "screenshot.enabled": "true",
    "screenshot.dir": "screenshots",
    "screenshot.retentionDays": "7",
    "parallel.enabled": "true",
    "parallel.threadCount": "4",
    "retry.maxCount": "2",
    "log.level": "INFO",
}

_MISSING = object()


def parse_properties(text: str) -> Dict[str, str]:
    """
    Parse ``.properties`` content into a dict.

    Supports ``key=value`` and ``key: value`` lines, ``#`` and ``!`` comments
    and blank lines. Keys and values are stripped; a later key wins.
    """
    properties: Dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line[0] in "#!":
            continue

        separators = [i for i in (line.find("="), line.find(":")) if i != -1]
        if not separators:
            properties[line] = ""
            continue

        index = min(separators)
        key = line[:index].strip()
        if key:
            properties[key] = line[index + 1 :].strip()
    return properties


def env_var_name(key: str) -> str:
    """Environment variable that overrides ``key`` (``a.bC`` -> ``DEMOQA_A_BC``)."""
    return ENV_PREFIX + key.replace(".", "_").upper()


def parse_bool(value: str) -> bool:
    """Only ``true`` (any case) is true, everything else is false."""
    return value.strip().lower() == "true"


class FrameworkSettings(BaseModel):
    """Validated, typed view of the configuration."""

    model_config = ConfigDict(frozen=True)

    base_url: str = DEFAULTS["base.url"]
    default_browser: BrowserType = BrowserType.CHROME
    headless: bool = False
    implicit_timeout: int = Field(default=20, gt=0)
    explicit_timeout: int = Field(default=20, gt=0)
    page_load_timeout: int = Field(default=60, gt=0)
    screenshot_enabled: bool = True
    screenshot_dir: str = "screenshots"
    screenshot_retention_days: int = Field(default=7, ge=0)
    parallel_enabled: bool = True
    parallel_thread_count: int = Field(default=4, gt=0)
    retry_max_count: int = Field(default=2, ge=0)
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("base_url must not be empty")
        return v if v.endswith("/") else v + "/"

    @field_validator("default_browser", mode="before")
    @classmethod
    def validate_browser(cls, v: Union[str, BrowserType]) -> BrowserType:
        if isinstance(v, BrowserType):
            return v
        return BrowserType.from_string(str(v))

    @property
    def implicit_timeout_ms(self) -> int:
        return self.implicit_timeout * 1000

    @property
    def explicit_timeout_ms(self) -> int:
        return self.explicit_timeout * 1000

    @property
    def page_load_timeout_ms(self) -> int:
        return self.page_load_timeout * 1000


class ConfigReader:
    """Read-only access to loaded properties with typed, defaulted getters."""

    def __init__(
        self,
        properties: Optional[Mapping[str, str]] = None,
        source: Optional[Path] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._properties: Dict[str, str] = dict(properties or {})
        self._environ: Mapping[str, str] = os.environ if environ is None else environ
        self.source = source

    @classmethod
    def load(
        cls,
        path: Optional[Union[str, Path]] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> ConfigReader:
        """
        Load configuration from the first available location.

        An explicit path (argument or ``DEMOQA_CONFIG_FILE``) must exist; the
        default locations are optional and fall back to built-in defaults.
        """
        env = os.environ if environ is None else environ
        explicit = path if path is not None else env.get(CONFIG_FILE_ENV)

        if explicit:
            config_path = Path(explicit)
            if not config_path.is_file():
                raise ConfigurationError(
                    f"Configuration file not found: {config_path}",
                    component="ConfigReader",
                )
            return cls._from_file(config_path, env)

        for candidate in DEFAULT_CONFIG_LOCATIONS:
            if candidate.is_file():
                return cls._from_file(candidate, env)

        logger.warning("No configuration file found, using built-in defaults")
        return cls({}, None, env)

    @classmethod
    def _from_file(cls, config_path: Path, env: Mapping[str, str]) -> ConfigReader:
        try:
            text = config_path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(
                f"Failed to load configuration file: {config_path}",
                component="ConfigReader",
                cause=e,
            ) from e
        logger.info(f"Configuration loaded successfully from {config_path}")
        return cls(parse_properties(text), config_path, env)

    def _lookup(self, key: str) -> Optional[str]:
        env_value = self._environ.get(env_var_name(key))
        if env_value is not None:
            return env_value
        return self._properties.get(key)

    def has_property(self, key: str) -> bool:
        return self._lookup(key) is not None

    @overload
    def get_property(self, key: str) -> str:
        ...

    @overload
    def get_property(self, key: str, default: str) -> str:
        ...

    def get_property(self, key: str, default: object = _MISSING) -> str:
        """Return a property; without a default a missing key is an error."""
        value = self._lookup(key)
        if value is not None:
            return value
        if default is _MISSING:
            raise ConfigurationError(
                f"Property not found: {key}", component="ConfigReader"
            )
        return str(default)

    def get_int(self, key: str, default: int) -> int:
        value = self.get_property(key, str(default))
        try:
            return int(value.strip())
        except ValueError:
            logger.warning(
                f"Invalid integer value for property '{key}': {value}. "
                f"Using default: {default}"
            )
            return default

    def get_bool(self, key: str, default: bool) -> bool:
        return parse_bool(self.get_property(key, str(default).lower()))

    def _get_default(self, key: str) -> str:
        return self.get_property(key, DEFAULTS[key])

    def get_base_url(self) -> str:
        return self._get_default("base.url")

    def get_default_browser(self) -> str:
        return self._get_default("browser.default")

    def is_headless(self) -> bool:
        return self.get_bool("browser.headless", False)

    def get_implicit_wait(self) -> int:
        return self.get_int("timeout.implicit", 20)

    def get_explicit_wait(self) -> int:
        return self.get_int("timeout.explicit", 20)

    def get_page_load_timeout(self) -> int:
        return self.get_int("timeout.pageLoad", 60)

    def is_screenshot_enabled(self) -> bool:
        return self.get_bool("screenshot.enabled", True)

    def get_screenshot_directory(self) -> str:
        return self._get_default("screenshot.dir")

    def get_screenshot_retention_days(self) -> int:
        return self.get_int("screenshot.retentionDays", 7)

    def is_parallel_enabled(self) -> bool:
        return self.get_bool("parallel.enabled", True)

    def get_parallel_thread_count(self) -> int:
        return self.get_int("parallel.threadCount", 4)

    def get_retry_max_count(self) -> int:
        return self.get_int("retry.maxCount", 2)

    def validate(self) -> None:
        """Fail fast when the keys every run needs are missing or blank."""
        for key, label in (("base.url", "Base URL"), ("browser.default", "Default browser")):
            value = self._lookup(key)
            if value is None or not value.strip():
                raise ConfigurationError(
                    f"{label} is required and cannot be empty",
                    component="ConfigReader",
                )
        logger.info("Configuration validation completed successfully")

    def to_settings(self) -> FrameworkSettings:
        """Build the validated settings model."""
        try:
            return FrameworkSettings(
                base_url=self.get_base_url(),
                default_browser=self.get_default_browser(),
                headless=self.is_headless(),
                implicit_timeout=self.get_implicit_wait(),
                explicit_timeout=self.get_explicit_wait(),
                page_load_timeout=self.get_page_load_timeout(),
                screenshot_enabled=self.is_screenshot_enabled(),
                screenshot_dir=self.get_screenshot_directory(),
                screenshot_retention_days=self.get_screenshot_retention_days(),
                parallel_enabled=self.is_parallel_enabled(),
                parallel_thread_count=self.get_parallel_thread_count(),
                retry_max_count=self.get_retry_max_count(),
                log_level=self._get_default("log.level"),
                log_file=self._lookup("log.file") or None,
            )
        except (ValidationError, ValueError) as e:
            raise ConfigurationError(
                f"Invalid configuration: {e}", component="ConfigReader", cause=e
            ) from e


_reader: Optional[ConfigReader] = None


def get_config() -> ConfigReader:
    """Return the process-wide configuration, loading it on first use."""
    global _reader
    if _reader is None:
        _reader = ConfigReader.load()
    return _reader


def get_settings() -> FrameworkSettings:
    return get_config().to_settings()


def reload_config(path: Optional[Union[str, Path]] = None) -> ConfigReader:
    """Drop the cached configuration and load it again."""
    global _reader
    _reader = None
    try:
        _reader = ConfigReader.load(path)
    except ConfigurationError:
        logger.error("Failed to reload configuration")
        raise
    logger.info("Configuration reloaded successfully")
    return _reader


def is_initialized() -> bool:
    return _reader is not None


def validate_configuration() -> None:
    get_config().validate()
