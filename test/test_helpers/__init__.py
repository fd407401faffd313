"""Test helpers package for the GitHub Automation test suite.

This package provides canned HTTP responses and reusable patch lists so
tests never reach the network.
"""

from .http_patches import (
    HTTP_PATCHES,
    TELEMETRY_PATCHES,
    make_response,
    setup_patch_list,
    teardown_patch_list,
)

__all__ = [
    'HTTP_PATCHES',
    'TELEMETRY_PATCHES',
    'make_response',
    'setup_patch_list',
    'teardown_patch_list',
]
