"""
Pydantic Settings for jpackager configuration.

Provides settings loading from TOML files, environment variables, and defaults.
"""

from __future__ import annotations

from contextvars import ContextVar
from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from .models.config import LoggingConfig, PackagingConfig

CONFIG_FILE_NAME = ".jpackager.toml"


def _get_logger():
    from ..services.logging import get_logger

    return get_logger()


def find_config_file(start_dir: str | None = None) -> Path | None:
    """
    Find .jpackager.toml by walking up from start_dir (or cwd).

    A pyproject.toml with a [tool.jpackager] table is accepted as well.

    Returns:
        Path to config file, or None if not found.
    """
    start = Path(start_dir) if start_dir else Path.cwd()

    for parent in [start, *list(start.parents)]:
        config_path = parent / CONFIG_FILE_NAME
        if config_path.exists():
            return config_path

        pyproject = parent / "pyproject.toml"
        if pyproject.exists():
            try:
                with open(pyproject, "rb") as f:
                    data = tomllib.load(f)
                if "tool" in data and "jpackager" in data["tool"]:
                    return pyproject
            except tomllib.TOMLDecodeError as e:
                _get_logger().debug("Failed to parse pyproject.toml at %s: %s", pyproject, e)
            except OSError as e:
                _get_logger().debug("Failed to read pyproject.toml at %s: %s", pyproject, e)

    return None


class TomlConfigSource(PydanticBaseSettingsSource):
    """
    Settings source reading one TOML file.

    The file is located and parsed once, on first access. Where it came
    from, or why it could not be used, is kept on the source for
    load_settings to copy onto the settings object.
    """

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        config_path: Path | None = None,
        start_dir: str | None = None,
    ):
        super().__init__(settings_cls)
        self._config_path = config_path
        self._start_dir = start_dir
        self._data: dict[str, Any] | None = None
        self.config_file: str | None = None
        self.config_error: str | None = None

    def _load_toml(self) -> dict[str, Any]:
        if self._data is not None:
            return self._data

        self._data = {}

        path = self._config_path
        if path is None:
            path = find_config_file(self._start_dir)

        if path is None:
            return self._data

        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            _get_logger().warning("Failed to parse config file %s: %s", path, e)
            self.config_error = f"Failed to parse config file: {e}"
            return self._data
        except OSError as e:
            _get_logger().warning("Failed to read config file %s: %s", path, e)
            self.config_error = f"Failed to read config file: {e}"
            return self._data

        if path.name == "pyproject.toml":
            data = data.get("tool", {}).get("jpackager", {})

        self._data = data
        self.config_file = str(path)
        return self._data

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._load_toml().get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        return dict(self._load_toml())


# Source used by the JPackagerSettings being constructed in this context
_toml_source: ContextVar[TomlConfigSource | None] = ContextVar(
    "jpackager_toml_source", default=None
)


class JPackagerSettings(BaseSettings):
    """jpackager settings with TOML and environment variable support.

    Priority (highest to lowest):
    1. Explicit init values
    2. Environment variables (JPACKAGER_<section>__<field>)
    3. TOML config file (.jpackager.toml or pyproject.toml [tool.jpackager])
    4. Model defaults
    """

    model_config = {
        "env_prefix": "JPACKAGER_",
        "env_nested_delimiter": "__",
        "extra": "ignore",
    }

    # Installation root of a managed JDK; preferred over JAVA_HOME
    toolchain_home: str | None = None

    package: PackagingConfig = Field(default_factory=PackagingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    _config_file: str | None = None
    _config_error: str | None = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Read init values, then the environment, then the TOML file."""
        toml_source = _toml_source.get() or TomlConfigSource(settings_cls)
        return (
            init_settings,
            env_settings,
            toml_source,
        )

    @property
    def config_file(self) -> str | None:
        """Path of the TOML file the settings were read from, if any."""
        return self._config_file

    @property
    def config_error(self) -> str | None:
        """Why the TOML file could not be used, if it could not."""
        return self._config_error


def load_settings(
    config_path: Path | None = None,
    start_dir: str | None = None,
    **overrides: Any,
) -> JPackagerSettings:
    """Load jpackager settings from config file and environment.

    Args:
        config_path: Explicit path to config file
        start_dir: Directory to start searching from (if config_path not given)
        **overrides: Explicit values taking precedence over every other source

    Returns:
        JPackagerSettings instance with all sources merged
    """
    source = TomlConfigSource(JPackagerSettings, config_path, start_dir)
    token = _toml_source.set(source)
    try:
        settings = JPackagerSettings(**overrides)
    finally:
        _toml_source.reset(token)

    settings._config_file = source.config_file
    settings._config_error = source.config_error
    return settings
