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

import datetime
from typing import Optional
from urllib.parse import urlencode

from ghautomation.commands.common import (
    add_additional_properties,
    encode_segment,
    get_repository_url,
    resolve_repository_elements,
    telemetry_args,
)
from ghautomation.core import (
    GitHubValidationError,
    HttpMethod,
    RequestDescriptor,
    invoke_rest_method,
    invoke_rest_method_multiple_result,
)

VALID_STATES = ("open", "closed", "all")
VALID_SORTS = ("due_on", "completeness")


def _decorate(result, owner: str, repository: str):
    return add_additional_properties(result, {
        "RepositoryUrl": get_repository_url(owner, repository),
        "MilestoneId": lambda item: item.get("id"),
        "MilestoneNumber": lambda item: item.get("number"),
    })


def format_due_on(due_on) -> str:
    """GitHub keeps only the date part of a due date; it is sent as midnight UTC."""
    if isinstance(due_on, datetime.datetime):
        due_on = due_on.date()
    if isinstance(due_on, datetime.date):
        return f"{due_on.isoformat()}T00:00:00Z"
    try:
        parsed = datetime.date.fromisoformat(str(due_on)[:10])
    except ValueError as e:
        raise GitHubValidationError(f"'{due_on}' is not a valid due date (expected YYYY-MM-DD).", due_on) from e
    return f"{parsed.isoformat()}T00:00:00Z"


def get_milestone(owner_name: Optional[str] = None, repository_name: Optional[str] = None,
                  uri: Optional[str] = None, milestone: Optional[int] = None, state: str = "open",
                  sort: str = "due_on", access_token: Optional[str] = None):
    """Gets a single milestone by number, or every milestone in the given state."""
    owner, repository = resolve_repository_elements(owner_name, repository_name, uri)
    base = f"repos/{encode_segment(owner)}/{encode_segment(repository)}/milestones"

    if milestone is not None:
        result = invoke_rest_method(RequestDescriptor(
            uri_fragment=f"{base}/{encode_segment(milestone)}",
            access_token=access_token,
            description=f"Getting milestone {milestone} for {repository}",
            **telemetry_args("get_milestone", OwnerName=owner, RepositoryName=repository),
        ))
        return _decorate(result, owner, repository)

    if state not in VALID_STATES:
        raise GitHubValidationError(f"State must be one of {', '.join(VALID_STATES)}.", state)
    if sort not in VALID_SORTS:
        raise GitHubValidationError(f"Sort must be one of {', '.join(VALID_SORTS)}.", sort)

    result = invoke_rest_method_multiple_result(RequestDescriptor(
        uri_fragment=f"{base}?{urlencode({'state': state, 'sort': sort})}",
        access_token=access_token,
        description=f"Getting milestones for {repository}",
        **telemetry_args("get_milestone", OwnerName=owner, RepositoryName=repository),
    ))
    return _decorate(result, owner, repository)


def new_milestone(title: str, state: str = "open", description: Optional[str] = None, due_on=None,
                  owner_name: Optional[str] = None, repository_name: Optional[str] = None,
                  uri: Optional[str] = None, access_token: Optional[str] = None):
    """Creates a milestone."""
    if state not in ("open", "closed"):
        raise GitHubValidationError("State must be 'open' or 'closed'.", state)

    owner, repository = resolve_repository_elements(owner_name, repository_name, uri)
    body = {"title": title, "state": state}
    if description:
        body["description"] = description
    if due_on is not None:
        body["due_on"] = format_due_on(due_on)

    result = invoke_rest_method(RequestDescriptor(
        uri_fragment=f"repos/{encode_segment(owner)}/{encode_segment(repository)}/milestones",
        method=HttpMethod.POST,
        body=body,
        access_token=access_token,
        description=f"Creating milestone {title} in {repository}",
        **telemetry_args("new_milestone", OwnerName=owner, RepositoryName=repository),
    ))
    return _decorate(result, owner, repository)


def remove_milestone(milestone: int, owner_name: Optional[str] = None, repository_name: Optional[str] = None,
                     uri: Optional[str] = None, access_token: Optional[str] = None) -> None:
    owner, repository = resolve_repository_elements(owner_name, repository_name, uri)
    invoke_rest_method(RequestDescriptor(
        uri_fragment=f"repos/{encode_segment(owner)}/{encode_segment(repository)}/milestones/{encode_segment(milestone)}",
        method=HttpMethod.DELETE,
        access_token=access_token,
        description=f"Removing milestone {milestone} from {repository}",
        **telemetry_args("remove_milestone", OwnerName=owner, RepositoryName=repository),
    ))
