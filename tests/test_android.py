"""Tests for the Android platform linker."""

from pathlib import Path

import pytest

from native_link.platforms import AndroidPlatform
from native_link.platforms.android.project import find_package_class_name, read_package_name
from native_link.platforms.android.register import (
    Patch,
    apply_patch,
    is_installed,
    normalize_project_name,
)

NAME = "react-native-vector-icons"


class TestAndroidProject:
    """Tests for Gradle project discovery."""

    def test_project_config(self, rn_app):
        config = AndroidPlatform().project_config(rn_app, {})

        assert config.source_dir == rn_app / "android"
        assert config.app_dir == rn_app / "android" / "app"
        assert config.package_name == "com.basic"
        assert config.main_file_path.name == "MainApplication.java"
        assert config.main_file_path.exists()
        assert config.assets_path == rn_app / "android" / "app" / "src" / "main" / "assets"

    def test_no_android_folder(self, tmp_path):
        assert AndroidPlatform().project_config(tmp_path, {}) is None

    def test_dependency_config(self, rn_app):
        dep = AndroidPlatform().dependency_config(rn_app / "node_modules" / NAME, {})

        assert dep.package_name == "com.vectoricons"
        assert dep.package_import_path == "import com.vectoricons.VectorIconsPackage;"
        assert dep.package_instance == "new VectorIconsPackage()"

    def test_dependency_params_override(self, rn_app):
        dep = AndroidPlatform().dependency_config(
            rn_app / "node_modules" / NAME,
            {"packageInstance": "new VectorIconsPackage(getApplicationContext())"},
        )
        assert dep.package_instance == "new VectorIconsPackage(getApplicationContext())"

    def test_package_name_from_namespace(self, tmp_path):
        manifest = tmp_path / "AndroidManifest.xml"
        manifest.write_text("<manifest></manifest>")
        gradle = tmp_path / "build.gradle"
        gradle.write_text("android {\n    namespace 'com.example.lib'\n}\n")
        assert read_package_name(manifest, gradle) == "com.example.lib"

    def test_kotlin_package_class(self, tmp_path):
        (tmp_path / "MapsPackage.kt").write_text("class MapsPackage : ReactPackage {\n}\n")
        assert find_package_class_name(tmp_path) == "MapsPackage"


class TestAndroidRegister:
    """Tests for patching Gradle and Java sources."""

    @pytest.fixture
    def configs(self, rn_app):
        platform = AndroidPlatform()
        project = platform.project_config(rn_app, {})
        dependency = platform.dependency_config(rn_app / "node_modules" / NAME, {})
        return platform, project, dependency

    def test_register(self, configs):
        platform, project, dependency = configs
        platform.register(NAME, dependency, project)

        settings = project.settings_gradle_path.read_text()
        assert f"include ':{NAME}'" in settings
        assert (
            f"project(':{NAME}').projectDir = new File(rootProject.projectDir, "
            f"'../node_modules/{NAME}/android')"
        ) in settings

        build = project.build_gradle_path.read_text()
        assert f"dependencies {{\n    implementation project(':{NAME}')\n" in build

        main = project.main_file_path.read_text()
        assert "import com.vectoricons.VectorIconsPackage;" in main
        assert "new MainReactPackage(),\n            new VectorIconsPackage()" in main

    def test_is_installed(self, configs):
        platform, project, dependency = configs
        assert not platform.is_installed(project, NAME, dependency)
        platform.register(NAME, dependency, project)
        assert platform.is_installed(project, NAME, dependency)

    def test_is_installed_legacy_compile(self, configs):
        _, project, _ = configs
        project.build_gradle_path.write_text("dependencies {\n    compile project(':foo')\n}\n")
        assert is_installed(project, "foo")
        assert not is_installed(project, "bar")

    def test_normalize_project_name(self):
        assert normalize_project_name("@scope/pkg") == "@scope_pkg"
        assert normalize_project_name("plain") == "plain"

    def test_apply_patch_appends_without_pattern(self, tmp_path):
        path = tmp_path / "settings.gradle"
        path.write_text("include ':app'")
        apply_patch(path, Patch(pattern=None, patch="include ':lib'\n"))
        assert path.read_text() == "include ':app'\ninclude ':lib'\n"


class TestAndroidAssets:
    """Tests for copying fonts into Android assets."""

    def test_copies_fonts_only(self, rn_app, tmp_path):
        platform = AndroidPlatform()
        project = platform.project_config(rn_app, {})
        font = tmp_path / "Lato.ttf"
        font.write_text("font")
        image = tmp_path / "logo.png"
        image.write_text("png")

        platform.copy_assets([font, image], project)

        fonts_dir = project.assets_path / "fonts"
        assert (fonts_dir / "Lato.ttf").read_text() == "font"
        assert not (fonts_dir / "logo.png").exists()
