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
Repository traffic statistics. GitHub only exposes the last 14 days and
requires push access to the repository.
"""

from typing import Optional

from ghautomation.commands.common import (
    add_additional_properties,
    encode_segment,
    get_repository_url,
    resolve_repository_elements,
    telemetry_args,
)
from ghautomation.core import GitHubValidationError, RequestDescriptor, invoke_rest_method

VALID_PERIODS = ("day", "week")


def _get_traffic(kind: str, event_name: str, owner_name, repository_name, uri, access_token, per=None):
    owner, repository = resolve_repository_elements(owner_name, repository_name, uri)
    fragment = f"repos/{encode_segment(owner)}/{encode_segment(repository)}/traffic/{kind}"
    if per is not None:
        if per not in VALID_PERIODS:
            raise GitHubValidationError(f"Per must be one of {', '.join(VALID_PERIODS)}.", per)
        fragment = f"{fragment}?per={per}"

    result = invoke_rest_method(RequestDescriptor(
        uri_fragment=fragment,
        access_token=access_token,
        description=f"Getting {kind.replace('/', ' ')} traffic for {repository}",
        **telemetry_args(event_name, OwnerName=owner, RepositoryName=repository),
    ))
    return add_additional_properties(result, {"RepositoryUrl": get_repository_url(owner, repository)})


def get_referrer_traffic(owner_name: Optional[str] = None, repository_name: Optional[str] = None,
                         uri: Optional[str] = None, access_token: Optional[str] = None):
    """Top 10 referrers over the last 14 days."""
    return _get_traffic("popular/referrers", "get_referrer_traffic", owner_name, repository_name, uri, access_token)


def get_path_traffic(owner_name: Optional[str] = None, repository_name: Optional[str] = None,
                     uri: Optional[str] = None, access_token: Optional[str] = None):
    """Top 10 popular content paths over the last 14 days."""
    return _get_traffic("popular/paths", "get_path_traffic", owner_name, repository_name, uri, access_token)


def get_view_traffic(owner_name: Optional[str] = None, repository_name: Optional[str] = None,
                     uri: Optional[str] = None, per: str = "day", access_token: Optional[str] = None):
    """Total and unique page views, bucketed per day or week."""
    return _get_traffic("views", "get_view_traffic", owner_name, repository_name, uri, access_token, per)


def get_clone_traffic(owner_name: Optional[str] = None, repository_name: Optional[str] = None,
                      uri: Optional[str] = None, per: str = "day", access_token: Optional[str] = None):
    """Total and unique clones, bucketed per day or week."""
    return _get_traffic("clones", "get_clone_traffic", owner_name, repository_name, uri, access_token, per)
