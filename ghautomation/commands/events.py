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

from typing import Optional

from ghautomation.commands.common import (
    add_additional_properties,
    encode_segment,
    get_repository_url,
    resolve_repository_elements,
    telemetry_args,
)
from ghautomation.core import RequestDescriptor, invoke_rest_method_multiple_result

# Issue events carry extra fields only when every relevant preview is requested.
EVENT_PREVIEW_MEDIA_TYPES = (
    "application/vnd.github.starfox-preview+json",
    "application/vnd.github.sailor-v-preview+json",
    "application/vnd.github.symmetra-preview+json",
    "application/vnd.github.machine-man-preview",
)
EVENT_ACCEPT_HEADER = ",".join(EVENT_PREVIEW_MEDIA_TYPES)


def get_event(owner_name: Optional[str] = None, repository_name: Optional[str] = None,
              uri: Optional[str] = None, issue: Optional[int] = None, access_token: Optional[str] = None):
    """Issue events for the whole repository, or for a single issue."""
    owner, repository = resolve_repository_elements(owner_name, repository_name, uri)
    fragment = f"repos/{encode_segment(owner)}/{encode_segment(repository)}/issues"
    if issue is not None:
        fragment = f"{fragment}/{encode_segment(issue)}"
    fragment = f"{fragment}/events"

    result = invoke_rest_method_multiple_result(RequestDescriptor(
        uri_fragment=fragment,
        accept_header=EVENT_ACCEPT_HEADER,
        access_token=access_token,
        description=f"Getting events for {repository}",
        **telemetry_args("get_event", OwnerName=owner, RepositoryName=repository),
    ))
    return add_additional_properties(result, {
        "RepositoryUrl": get_repository_url(owner, repository),
        "EventId": lambda item: item.get("id"),
    })
