"""Shared fixtures: a small app checkout with one native dependency."""

import json
import shutil
from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"

MAIN_APPLICATION = """package com.basic;

import android.app.Application;

import com.facebook.react.ReactApplication;
import com.facebook.react.ReactPackage;
import com.facebook.react.shell.MainReactPackage;

import java.util.Arrays;
import java.util.List;

public class MainApplication extends Application implements ReactApplication {
    protected List<ReactPackage> getPackages() {
        return Arrays.<ReactPackage>asList(
            new MainReactPackage()
        );
    }
}
"""

APP_BUILD_GRADLE = """apply plugin: "com.android.application"

android {
    compileSdkVersion 28
}

dependencies {
    implementation fileTree(dir: "libs", include: ["*.jar"])
    implementation "com.facebook.react:react-native:+"
}
"""

DEPENDENCY_PACKAGE = """package com.vectoricons;

import com.facebook.react.ReactPackage;

public class VectorIconsPackage implements ReactPackage {
}
"""


def _write(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


@pytest.fixture
def rn_app(tmp_path):
    """Create an app with iOS and Android projects and an installed dependency."""
    root = tmp_path / "Basic"
    _write(root / "package.json", json.dumps({
        "name": "basic",
        "dependencies": {
            "react-native": "0.57.0",
            "react-native-vector-icons": "^6.0.0",
        },
    }))

    # iOS
    pbxproj = root / "ios" / "Basic.xcodeproj" / "project.pbxproj"
    pbxproj.parent.mkdir(parents=True)
    shutil.copyfile(FIXTURES / "project.pbxproj", pbxproj)

    # Android
    android = root / "android"
    _write(android / "settings.gradle", "rootProject.name = 'Basic'\ninclude ':app'\n")
    _write(android / "app" / "build.gradle", APP_BUILD_GRADLE)
    _write(
        android / "app" / "src" / "main" / "AndroidManifest.xml",
        '<manifest xmlns:android="http://schemas.android.com/apk/res/android"\n'
        '    package="com.basic">\n</manifest>\n',
    )
    _write(
        android / "app" / "src" / "main" / "java" / "com" / "basic" / "MainApplication.java",
        MAIN_APPLICATION,
    )

    # Dependency
    dep = root / "node_modules" / "react-native-vector-icons"
    _write(dep / "package.json", json.dumps({
        "name": "react-native-vector-icons",
        "rnpm": {
            "assets": ["Fonts"],
            "commands": {"postlink": "node scripts/postlink.js"},
        },
    }))
    _write(dep / "Fonts" / "Entypo.ttf", "font")
    _write(dep / "Fonts" / "Feather.ttf", "font")
    (dep / "RNVectorIcons.xcodeproj").mkdir(parents=True)
    shutil.copyfile(FIXTURES / "project.pbxproj", dep / "RNVectorIcons.xcodeproj" / "project.pbxproj")
    _write(dep / "RNVectorIconsManager" / "RNVectorIconsManager.h", "// header\n")
    _write(
        dep / "android" / "src" / "main" / "AndroidManifest.xml",
        '<manifest package="com.vectoricons"></manifest>\n',
    )
    _write(
        dep / "android" / "src" / "main" / "java" / "com" / "vectoricons" / "VectorIconsPackage.java",
        DEPENDENCY_PACKAGE,
    )
    return root
