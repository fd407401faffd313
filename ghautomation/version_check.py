# -
# #%L
# GitHub Automation
# %%
# Copyright (C) 2026 Contrast Security, Inc.
# %%
# Contact: support@contrastsecurity.com
# License: Commercial
# NOTICE: This Software and the patented inventions embodied within may only be
# used as part of Contrast Security's commercial offerings. Even though it is
# made available through public repositories, use of this Software is subject to
# the applicable End User Licensing Agreement found at
# https://www.contrastsecurity.com/enduser-terms-0317a or as otherwise agreed
# between Contrast Security and the End User. The Software may not be reverse
# engineered, modified, repackaged, sold, redistributed or otherwise used in a
# way not consistent with the End User License Agreement.
# #L%
#

import requests
from packaging.version import InvalidVersion, Version, parse as parse_version

from ghautomation.config import get_config
from ghautomation.utils import debug_log, log

PACKAGE_NAME = "github-automation"
PYPI_URL = f"https://pypi.org/pypi/{PACKAGE_NAME}/json"
VERSION_CHECK_TIMEOUT_SECONDS = 5


def normalize_version(version_str: str) -> str:
    """Strips a leading 'v' so tag style versions parse."""
    if version_str and version_str.lower().startswith('v'):
        return version_str[1:]
    return version_str


def safe_parse_version(version_str: str):
    """Safely parse a version string, returning None if it is not a valid version."""
    try:
        return parse_version(normalize_version(version_str))
    except (InvalidVersion, TypeError):
        return None


def get_latest_published_version():
    """Fetches the latest released version of this package from PyPI."""
    try:
        debug_log(f"Fetching release information from: {PYPI_URL}")
        response = requests.get(PYPI_URL, timeout=VERSION_CHECK_TIMEOUT_SECONDS)
        response.raise_for_status()
        payload = response.json()
        info = payload.get("info") if isinstance(payload, dict) else None
        latest = info.get("version") if isinstance(info, dict) else None
        if not latest:
            debug_log("No version information found in the package index response.")
            return None
        debug_log(f"Latest version found: {latest}")
        return latest
    except requests.exceptions.RequestException as e:
        debug_log(f"Error fetching release information: {e}")
        return None
    except ValueError as e:
        debug_log(f"Invalid release information received: {e}")
        return None


def check_for_newer_version(current_version, latest_version_str: str):
    """Compares the current version with the latest version.
    Returns the latest_version_str if it's newer, otherwise None.

    Args:
        current_version: Either a string version or a Version object
        latest_version_str: String representation of the latest version
    """
    current_v = current_version if isinstance(current_version, Version) else safe_parse_version(current_version)
    latest_v = safe_parse_version(latest_version_str)
    if current_v is None or latest_v is None:
        debug_log(f"Error parsing versions for comparison: {current_version}, {latest_version_str}")
        return None

    debug_log(f"Comparing versions: current={current_v} latest={latest_v}")
    if latest_v > current_v:
        return latest_version_str
    return None


def do_version_check(config=None):
    """
    Logs a notice when a newer release is published. Never raises; any
    problem reaching the package index is only debug-logged.
    """
    config = config or get_config()
    if config.disable_update_check:
        debug_log("Update check is disabled.")
        return None

    current_version = safe_parse_version(config.VERSION)
    if current_version is None:
        debug_log(f"Could not parse current version '{config.VERSION}'. Skipping version check.")
        return None

    latest = get_latest_published_version()
    if not latest:
        debug_log("Could not determine the latest published version.")
        return None

    newer_version = check_for_newer_version(current_version, latest)
    if newer_version:
        log(f"INFO: A newer version of {PACKAGE_NAME} is available ({newer_version}). "
            f"You are running {config.VERSION}. Upgrade with: pip install --upgrade {PACKAGE_NAME}")
    return newer_version
