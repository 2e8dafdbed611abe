"""
Unit tests for the packaging configuration models.
"""

import platform

import pytest
from pydantic import ValidationError

from jpackager.core.models.config import (
    ImageType,
    LinuxOptions,
    MacOptions,
    PackagingConfig,
    PlatformOptions,
    WindowsOptions,
)
from jpackager.core.models.platform import HostOS
from jpackager.core.models.run import ProcessResult


class TestHostOS:
    @pytest.mark.parametrize(
        ("system", "expected"),
        [
            ("Windows", HostOS.WINDOWS),
            ("CYGWIN_NT-10.0", HostOS.WINDOWS),
            ("Darwin", HostOS.MACOS),
            ("Linux", HostOS.LINUX),
            ("FreeBSD", HostOS.OTHER),
        ],
    )
    def test_from_system_name(self, system: str, expected: HostOS) -> None:
        assert HostOS.from_system_name(system) is expected

    def test_current_uses_platform_system(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(platform, "system", lambda: "Darwin")
        assert HostOS.current() is HostOS.MACOS


class TestImageType:
    @pytest.mark.parametrize("value", ["app-image", "APP_IMAGE", "App-Image", ImageType.APP_IMAGE])
    def test_accepts_names_and_values(self, value) -> None:
        assert PackagingConfig(type=value).type == ImageType.APP_IMAGE

    def test_default_is_unspecified(self) -> None:
        assert PackagingConfig().type == ImageType.DEFAULT

    def test_rejects_unknown_type(self) -> None:
        with pytest.raises(ValidationError):
            PackagingConfig(type="zip")


class TestPlatformOptions:
    def test_base_group_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            PlatformOptions()

    def test_each_host_selects_its_own_group(self) -> None:
        config = PackagingConfig()
        assert isinstance(config.platform_options(HostOS.WINDOWS), WindowsOptions)
        assert isinstance(config.platform_options(HostOS.MACOS), MacOptions)
        assert isinstance(config.platform_options(HostOS.LINUX), LinuxOptions)
        assert config.platform_options(HostOS.OTHER) is None

    def test_groups_are_populated_independently_of_host(self) -> None:
        config = PackagingConfig.model_validate(
            {"windows": {"menu": True}, "mac": {"sign": True}, "linux": {"shortcut": True}}
        )
        assert config.windows.menu and config.mac.sign and config.linux.shortcut

    def test_unknown_platform_fields_are_ignored(self) -> None:
        config = PackagingConfig.model_validate({"linux": {"no_such_flag": "x"}})
        assert config.linux == LinuxOptions()


class TestListFields:
    def test_single_string_is_one_option(self) -> None:
        config = PackagingConfig(java_options="-Xmx2g")
        assert config.java_options == ["-Xmx2g"]

    def test_commas_inside_an_option_are_kept(self) -> None:
        config = PackagingConfig(java_options="-XX:CompileCommand=exclude,Foo.bar")
        assert config.java_options == ["-XX:CompileCommand=exclude,Foo.bar"]

    def test_json_array_string_is_decoded(self) -> None:
        config = PackagingConfig(arguments='["--port", "8080 8081"]')
        assert config.arguments == ["--port", "8080 8081"]

    def test_empty_string_is_no_options(self) -> None:
        assert PackagingConfig(java_options="").java_options == []

    def test_lists_are_kept(self) -> None:
        config = PackagingConfig(arguments=["a,b"])
        assert config.arguments == ["a,b"]


class TestProcessResult:
    def test_succeeded(self) -> None:
        assert ProcessResult(exit_code=0, command=["jpackage"], duration=0.0).succeeded
        assert not ProcessResult(exit_code=2, command=["jpackage"], duration=0.0).succeeded

    def test_requires_command(self) -> None:
        with pytest.raises(ValidationError):
            ProcessResult(exit_code=0, command=[], duration=0.0)
