"""Version helper for the chartframe package."""

from importlib import metadata
from pathlib import Path

PACKAGE_NAME = "chartframe"
FALLBACK_VERSION = "0.0.0"


def get_version() -> str:
    """
    Get version for the package.

    Installed distributions report their metadata version; a source checkout
    asks setuptools_scm, falling back to ``0.0.0`` outside a git work tree.

    :return: Version number.
    """
    try:
        return metadata.version(PACKAGE_NAME)
    except metadata.PackageNotFoundError:  # dev
        import setuptools_scm  # type: ignore[import-untyped]

        root = Path(__file__).resolve().parents[2]
        version = setuptools_scm.get_version(
            root=str(root), fallback_version=FALLBACK_VERSION
        )
        return str(version)


__all__ = ["get_version"]
