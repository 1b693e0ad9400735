"""Shared constants for the link command."""

ISSUES_URL = "https://github.com/react-native-community/react-native-cli/issues"
EJECTING_URL = (
    "https://github.com/react-community/create-react-native-app/blob/master/EJECTING.md"
)

PROJECT_NOT_FOUND_MESSAGE = (
    "No package found. Are you sure this is a React Native project?"
)
MANAGED_PROJECT_MESSAGE = (
    "`native-link link [package]` can not be used in Create React Native App projects. "
    "If you need to include a library that relies on custom native code, "
    "you might have to eject first. "
    f"See {EJECTING_URL} for more information."
)
UNKNOWN_DEPENDENCY_MESSAGE = (
    "Unknown dependency. Make sure that the package you are trying to link is "
    "already installed in your node_modules and present in your package.json "
    "dependencies."
)

# Project layout
PACKAGE_JSON = "package.json"
NODE_MODULES = "node_modules"
MANAGED_SCRIPTS = ("node_modules", ".bin", "react-native-scripts")
CONFIG_KEY = "rnpm"
IGNORED_DEPENDENCIES = frozenset({"react-native"})

# iOS
IOS_LIBRARY_FOLDER = "Libraries"
IOS_RESOURCES_FOLDER = "Resources"
IOS_IGNORED_DIRS = frozenset({"node_modules", "Pods", "Examples", "Example", "test", "tests"})

# Asset types by file extension
FONT_EXTENSIONS = frozenset({".ttf", ".otf"})
IMAGE_EXTENSIONS = frozenset({".png", ".jpg", ".jpeg", ".gif", ".bmp", ".webp", ".svg"})
