"""Installed calcdemo version, read from package metadata."""

from importlib.metadata import PackageNotFoundError, version

PACKAGE_NAME = "calcdemo"

# Reported when running from a checkout that was never installed
UNKNOWN_VERSION = "0.0.0+unknown"


def get_version() -> str:
    try:
        return version(PACKAGE_NAME)
    except PackageNotFoundError:
        return UNKNOWN_VERSION
