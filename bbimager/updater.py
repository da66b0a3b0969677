"""Checks whether a newer release of the application is available."""

from __future__ import annotations

from typing import Any, Callable, Optional, Union

import semver


class UpdateError(OSError):
    """Raised when the latest release cannot be determined."""


def parse_release_name(name: str) -> semver.Version:
    """Parse a release name of the form ``v<semver>``."""
    if not name.startswith("v"):
        raise UpdateError("Invalid version")
    try:
        return semver.Version.parse(name[1:])
    except (ValueError, TypeError) as exc:
        raise UpdateError(str(exc)) from exc


def latest_version(fetch_json: Callable[[str], Any], url: str) -> semver.Version:
    """Fetch release metadata from ``url`` and return its version."""
    release = fetch_json(url)
    if not isinstance(release, dict) or not isinstance(release.get("name"), str):
        raise UpdateError("Invalid release metadata")
    return parse_release_name(release["name"])


def check_update(
    fetch_json: Callable[[str], Any],
    url: str,
    current_version: Union[str, semver.Version],
) -> Optional[semver.Version]:
    """Return the latest version if it is newer than ``current_version``, else None."""
    current = (
        current_version
        if isinstance(current_version, semver.Version)
        else semver.Version.parse(current_version)
    )
    latest = latest_version(fetch_json, url)
    return latest if current < latest else None