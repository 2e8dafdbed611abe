"""
Configuration models.

Provides Pydantic models describing a jpackage invocation. Generic options
live on PackagingConfig; flags that only make sense on one operating system
live on WindowsOptions, MacOptions and LinuxOptions.
"""

from __future__ import annotations

import json
from abc import abstractmethod
from enum import Enum
from typing import Annotated, Any, ClassVar, Literal

from pydantic import ConfigDict, Field, field_validator
from pydantic_settings import NoDecode

from .base import JPackagerBaseModel
from .platform import HostOS

LogLevel = Literal["debug", "info", "warning", "error"]

# A jpackage flag paired with its configured value. Strings are emitted as
# "--flag value", booleans as a bare "--flag".
FlagValue = tuple[str, str | bool]

# Repeatable option. Environment values reach the validator as raw strings.
OptionList = Annotated[list[str], NoDecode]


class ImageType(str, Enum):
    """Package format passed to ``--type``."""

    DEFAULT = ""
    APP_IMAGE = "app-image"
    EXE = "exe"
    MSI = "msi"
    DMG = "dmg"
    PKG = "pkg"
    DEB = "deb"
    RPM = "rpm"


class ConfigBaseModel(JPackagerBaseModel):
    """Base model for config sections with relaxed strict mode for TOML loading."""

    model_config = ConfigDict(
        strict=False,  # Allow coercion from TOML and env types
        validate_assignment=True,
        extra="ignore",  # Ignore unknown fields in config files
        populate_by_name=True,
        use_enum_values=True,
        revalidate_instances="never",
    )


class PlatformOptions(ConfigBaseModel):
    """Flags that jpackage only accepts on one operating system."""

    host: ClassVar[HostOS] = HostOS.OTHER

    @abstractmethod
    def flags(self) -> list[FlagValue]:
        """Return the (flag, value) pairs of this group in emission order."""


class WindowsOptions(PlatformOptions):
    """Windows specific parameters."""

    host: ClassVar[HostOS] = HostOS.WINDOWS

    menu: bool = False
    dir_chooser: bool = False
    upgrade_uuid: str = ""
    menu_group: str = ""
    shortcut: bool = False
    per_user_install: bool = False

    def flags(self) -> list[FlagValue]:
        return [
            ("--win-menu", self.menu),
            ("--win-dir-chooser", self.dir_chooser),
            ("--win-upgrade-uuid", self.upgrade_uuid),
            ("--win-menu-group", self.menu_group),
            ("--win-shortcut", self.shortcut),
            ("--win-per-user-install", self.per_user_install),
        ]


class MacOptions(PlatformOptions):
    """macOS specific parameters."""

    host: ClassVar[HostOS] = HostOS.MACOS

    package_identifier: str = ""
    package_name: str = ""
    package_signing_prefix: str = ""
    sign: bool = False
    signing_keychain: str = ""
    signing_key_user_name: str = ""

    def flags(self) -> list[FlagValue]:
        return [
            ("--mac-package-identifier", self.package_identifier),
            ("--mac-package-name", self.package_name),
            ("--mac-package-signing-prefix", self.package_signing_prefix),
            ("--mac-sign", self.sign),
            ("--mac-signing-keychain", self.signing_keychain),
            ("--mac-signing-key-user-name", self.signing_key_user_name),
        ]


class LinuxOptions(PlatformOptions):
    """Linux specific parameters."""

    host: ClassVar[HostOS] = HostOS.LINUX

    package_name: str = ""
    deb_maintainer: str = ""
    menu_group: str = ""
    rpm_license_type: str = ""
    app_release: str = ""
    app_category: str = ""
    shortcut: bool = False

    def flags(self) -> list[FlagValue]:
        return [
            ("--linux-package-name", self.package_name),
            ("--linux-deb-maintainer", self.deb_maintainer),
            ("--linux-menu-group", self.menu_group),
            ("--linux-rpm-license-type", self.rpm_license_type),
            ("--linux-app-release", self.app_release),
            ("--linux-app-category", self.app_category),
            ("--linux-shortcut", self.shortcut),
        ]


class PackagingConfig(ConfigBaseModel):
    """Everything needed to build one jpackage command line.

    The three platform groups can all be filled in at once; only the one
    returned by platform_options() for the execution host is ever emitted.
    """

    verbose: bool = False
    type: ImageType = ImageType.DEFAULT
    app_name: str = ""
    app_version: str = ""
    vendor: str = ""
    icon: str = ""
    runtime_image: str = ""
    input: str = ""
    install_dir: str = ""
    destination: str = ""
    module: str = ""
    main_class: str = ""
    main_jar: str = ""
    copyright: str = ""
    app_description: str = ""
    module_path: str = ""
    java_options: OptionList = Field(default_factory=list)
    arguments: OptionList = Field(default_factory=list)

    windows: WindowsOptions = Field(default_factory=WindowsOptions)
    mac: MacOptions = Field(default_factory=MacOptions)
    linux: LinuxOptions = Field(default_factory=LinuxOptions)

    @field_validator("type", mode="before")
    @classmethod
    def parse_image_type(cls, v: Any) -> Any:
        """Accept enum names (``APP_IMAGE``) as well as jpackage values (``app-image``)."""
        if isinstance(v, str) and not isinstance(v, ImageType):
            normalized = v.strip()
            member = ImageType.__members__.get(normalized.upper().replace("-", "_"))
            if member is not None:
                return member
            return normalized.lower()
        return v

    @field_validator("java_options", "arguments", mode="before")
    @classmethod
    def parse_option_list(cls, v: Any) -> Any:
        """Accept a JSON array string or a single option.

        A plain string is a single entry; commas inside it are kept
        (-XX:CompileCommand=exclude,Foo.bar is one JVM option).
        """
        if not isinstance(v, str):
            return v
        text = v.strip()
        if not text:
            return []
        if text.startswith("["):
            try:
                return json.loads(text)
            except json.JSONDecodeError:
                return [text]
        return [text]

    def generic_flags(self) -> list[FlagValue]:
        """Return the host independent (flag, value) pairs in emission order."""
        return [
            ("--verbose", self.verbose),
            ("--name", self.app_name),
            ("--app-version", self.app_version),
            ("--dest", self.destination),
            ("--copyright", self.copyright),
            ("--description", self.app_description),
            ("--runtime-image", self.runtime_image),
            ("--input", self.input),
            ("--install-dir", self.install_dir),
            ("--vendor", self.vendor),
            ("--module", self.module),
            ("--main-class", self.main_class),
            ("--main-jar", self.main_jar),
            ("--module-path", self.module_path),
            ("--icon", self.icon),
        ]

    def platform_options(self, host: HostOS) -> PlatformOptions | None:
        """Select the single platform group that applies to ``host``."""
        for group in (self.windows, self.mac, self.linux):
            if group.host == host:
                return group
        return None


class LoggingConfig(ConfigBaseModel):
    """Logging configuration section."""

    level: LogLevel = "warning"
    console: bool = False
    file: bool = True
    # Log file location; empty means ~/.jpackager/jpackager.log
    path: str = ""
