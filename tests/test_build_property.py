"""Tests for reading build settings from Xcode projects."""

from pathlib import Path
from types import SimpleNamespace

import pytest
from pbxproj import XcodeProject

from native_link.errors import MalformedProjectError
from native_link.platforms.ios import get_build_property

FIXTURE = Path(__file__).parent / "fixtures" / "project.pbxproj"


def fake_project(targets, configurations=None, settings=None):
    """Minimal stand-in for a loaded Xcode project."""
    objects = {
        "ROOT": SimpleNamespace(isa="PBXProject", targets=targets),
        "AGG": SimpleNamespace(isa="PBXAggregateTarget", name="Agg", buildConfigurationList="AGGLIST"),
        "TARGET": SimpleNamespace(isa="PBXNativeTarget", name="App", buildConfigurationList="LIST"),
        "LIST": SimpleNamespace(isa="XCConfigurationList", buildConfigurations=configurations or []),
        "AGGLIST": SimpleNamespace(isa="XCConfigurationList", buildConfigurations=["AGGDEBUG"]),
        "AGGDEBUG": SimpleNamespace(isa="XCBuildConfiguration", buildSettings={"INFOPLIST_FILE": "Agg.plist"}),
        "DEBUG": SimpleNamespace(isa="XCBuildConfiguration", buildSettings=settings or {}),
        "RELEASE": SimpleNamespace(isa="XCBuildConfiguration", buildSettings={"INFOPLIST_FILE": "Release.plist"}),
    }
    return SimpleNamespace(rootObject="ROOT", objects=objects)


class TestGetBuildProperty:
    """Tests for get_build_property."""

    @pytest.fixture
    def project(self):
        return XcodeProject.load(str(FIXTURE))

    def test_returns_property_from_main_target(self, project):
        assert get_build_property(project, "INFOPLIST_FILE") == "Basic/Info.plist"

    def test_missing_property_returns_none(self, project):
        assert get_build_property(project, "NOT_A_SETTING") is None

    def test_uses_first_configuration(self):
        project = fake_project(["TARGET"], ["DEBUG", "RELEASE"], {"INFOPLIST_FILE": "Debug.plist"})
        assert get_build_property(project, "INFOPLIST_FILE") == "Debug.plist"

    def test_skips_non_native_targets(self):
        project = fake_project(["AGG", "TARGET"], ["DEBUG"], {"PRODUCT_NAME": "App"})
        assert get_build_property(project, "PRODUCT_NAME") == "App"

    def test_no_native_target(self):
        project = fake_project(["AGG"])
        with pytest.raises(MalformedProjectError, match="no native target"):
            get_build_property(project, "INFOPLIST_FILE")

    def test_no_build_configuration(self):
        project = fake_project(["TARGET"], [])
        with pytest.raises(MalformedProjectError, match="no build configuration"):
            get_build_property(project, "INFOPLIST_FILE")
