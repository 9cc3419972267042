#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdstream/utils/packages.py
"""Installed-distribution lookups for optional features."""

from __future__ import annotations

import importlib
from importlib import metadata
from typing import NamedTuple, Optional

from packaging.specifiers import SpecifierSet
from packaging.version import InvalidVersion, Version


class PackageStatus(NamedTuple):
    """Result of probing one optional dependency."""

    install_name: str
    version_spec: str
    import_error: Optional[ImportError] = None
    installed_version: Optional[str] = None
    satisfied: bool = True


def installed_version(install_name: str) -> Optional[str]:
    """Return the installed version of distribution ``install_name``, or None."""
    try:
        return metadata.version(install_name)
    except metadata.PackageNotFoundError:
        return None


def probe_package(install_name: str, import_name: str, version_spec: str = "") -> PackageStatus:
    """Import ``import_name`` and compare its distribution against ``version_spec``.

    Parameters
    ----------
    install_name : str
        Distribution name on the package index (e.g. "linkify-it-py")
    import_name : str
        Top-level module name (e.g. "linkify_it")
    version_spec : str, default ""
        PEP 440 specifier; empty accepts any version

    Returns
    -------
    PackageStatus
        ``import_error`` is set when the import failed, ``satisfied`` is False
        when the import succeeded but the version does not match

    """
    try:
        importlib.import_module(import_name)
    except ImportError as e:
        return PackageStatus(install_name, version_spec, import_error=e, satisfied=False)

    if not version_spec:
        return PackageStatus(install_name, version_spec)

    found = installed_version(install_name)
    if found is None:
        return PackageStatus(install_name, version_spec, satisfied=False)
    try:
        ok = Version(found) in SpecifierSet(version_spec)
    except InvalidVersion:
        ok = False
    return PackageStatus(install_name, version_spec, installed_version=found, satisfied=ok)
