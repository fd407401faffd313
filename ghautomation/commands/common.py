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

"""
Helpers shared by the command modules: repository resolution, URL-safe
path segments, telemetry arguments and result decoration.
"""

from typing import Any, Dict, Optional, Tuple
from urllib.parse import quote, urlparse

from ghautomation.config import get_config
from ghautomation.core.errors import GitHubValidationError


def encode_segment(value: Any) -> str:
    """Escapes a value for use as a single URI path segment."""
    return quote(str(value), safe='')


def telemetry_args(event_name: str, **properties) -> Dict[str, Any]:
    """Keyword arguments for RequestDescriptor naming the event and its properties."""
    return {
        "telemetry_event_name": event_name,
        "telemetry_exception_bucket": event_name,
        "telemetry_properties": {k: v for k, v in properties.items() if v is not None},
    }


def split_repository_uri(uri: str) -> Tuple[str, str]:
    """
    Extracts owner and repository from a repository URL.

    Accepts https://<host>/<owner>/<repo>, optionally with a trailing .git or
    extra path segments, as well as API-style https://api.<host>/repos/<owner>/<repo>.
    """
    parsed = urlparse(uri if "://" in uri else f"https://{uri}")
    segments = [segment for segment in parsed.path.split('/') if segment]
    if segments[:1] == ["repos"]:
        segments = segments[1:]
    elif segments[:3] == ["api", "v3", "repos"]:
        segments = segments[3:]

    if len(segments) < 2:
        raise GitHubValidationError(f"Unable to determine the owner and repository from '{uri}'.", uri)

    repository = segments[1]
    if repository.endswith(".git"):
        repository = repository[:-4]
    return segments[0], repository


def resolve_repository_elements(owner_name: Optional[str] = None, repository_name: Optional[str] = None,
                                uri: Optional[str] = None, config=None) -> Tuple[str, str]:
    """
    Returns (owner, repository) from a URL or explicit names, falling back to
    the configured default owner and repository.

    Raises:
        GitHubValidationError: If both a URL and names are given, or nothing resolves
    """
    if uri and (owner_name or repository_name):
        raise GitHubValidationError("Specify either a repository URI or owner and repository names, not both.",
                                    uri)
    if uri:
        return split_repository_uri(uri)

    config = config or get_config()
    owner = owner_name or config.default_owner_name
    repository = repository_name or config.default_repository_name
    if not owner or not repository:
        raise GitHubValidationError(
            "Unable to determine the owner and repository. Provide them explicitly, a repository URI, "
            "or configure GITHUB_DEFAULT_OWNER_NAME and GITHUB_DEFAULT_REPOSITORY_NAME.")
    return owner, repository


def get_repository_url(owner: str, repository: str, config=None) -> str:
    """The browser URL for a repository on the configured host."""
    config = config or get_config()
    return f"https://{config.api_host_name}/{owner}/{repository}"


def add_additional_properties(result: Any, properties: Dict[str, Any], config=None) -> Any:
    """
    Adds convenience keys to each returned object so results can be passed
    straight into follow-up commands. Leaves results untouched when pipeline
    support is disabled.

    Values in properties may be callables taking the item, for keys that
    depend on the item itself (e.g. its id).
    """
    config = config or get_config()
    if config.disable_pipeline_support or result is None:
        return result

    items = result if isinstance(result, list) else [result]
    for item in items:
        if not isinstance(item, dict):
            continue
        for key, value in properties.items():
            item[key] = value(item) if callable(value) else value
    return result
