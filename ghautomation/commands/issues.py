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

from typing import List, Optional
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


def _decorate(result, owner: str, repository: str):
    return add_additional_properties(result, {
        "RepositoryUrl": get_repository_url(owner, repository),
        "IssueId": lambda item: item.get("id"),
        "IssueNumber": lambda item: item.get("number"),
    })


def get_issue(owner_name: Optional[str] = None, repository_name: Optional[str] = None,
              uri: Optional[str] = None, issue: Optional[int] = None, state: str = "open",
              labels: Optional[List[str]] = None, assignee: Optional[str] = None,
              include_pull_requests: bool = False, access_token: Optional[str] = None):
    """
    Gets a single issue by number, or the repository's issues matching the filters.

    GitHub returns pull requests from the issues endpoint as well; they are
    dropped unless include_pull_requests is set.
    """
    owner, repository = resolve_repository_elements(owner_name, repository_name, uri)
    base = f"repos/{encode_segment(owner)}/{encode_segment(repository)}/issues"

    if issue is not None:
        result = invoke_rest_method(RequestDescriptor(
            uri_fragment=f"{base}/{encode_segment(issue)}",
            access_token=access_token,
            description=f"Getting issue {issue} for {repository}",
            **telemetry_args("get_issue", OwnerName=owner, RepositoryName=repository),
        ))
        return _decorate(result, owner, repository)

    if state not in VALID_STATES:
        raise GitHubValidationError(f"State must be one of {', '.join(VALID_STATES)}.", state)

    query = {"state": state}
    if labels:
        query["labels"] = ",".join(labels)
    if assignee:
        query["assignee"] = assignee

    result = invoke_rest_method_multiple_result(RequestDescriptor(
        uri_fragment=f"{base}?{urlencode(query)}",
        access_token=access_token,
        description=f"Getting issues for {repository}",
        **telemetry_args("get_issue", OwnerName=owner, RepositoryName=repository),
    ))
    if not include_pull_requests:
        result = [item for item in result if "pull_request" not in item]
    return _decorate(result, owner, repository)


def new_issue(title: str, body: Optional[str] = None, assignees: Optional[List[str]] = None,
              labels: Optional[List[str]] = None, milestone: Optional[int] = None,
              owner_name: Optional[str] = None, repository_name: Optional[str] = None,
              uri: Optional[str] = None, access_token: Optional[str] = None):
    """Creates an issue."""
    if not title:
        raise GitHubValidationError("An issue title is required.")

    owner, repository = resolve_repository_elements(owner_name, repository_name, uri)
    payload = {"title": title}
    if body:
        payload["body"] = body
    if assignees:
        payload["assignees"] = assignees
    if labels:
        payload["labels"] = labels
    if milestone is not None:
        payload["milestone"] = milestone

    result = invoke_rest_method(RequestDescriptor(
        uri_fragment=f"repos/{encode_segment(owner)}/{encode_segment(repository)}/issues",
        method=HttpMethod.POST,
        body=payload,
        access_token=access_token,
        description=f"Creating new issue in {repository}",
        **telemetry_args("new_issue", OwnerName=owner, RepositoryName=repository),
    ))
    return _decorate(result, owner, repository)


def add_issue_label(issue: int, labels: List[str], owner_name: Optional[str] = None,
                    repository_name: Optional[str] = None, uri: Optional[str] = None,
                    access_token: Optional[str] = None):
    """Adds labels to an issue and returns the issue's full label list."""
    if not labels:
        raise GitHubValidationError("At least one label is required.", issue)

    owner, repository = resolve_repository_elements(owner_name, repository_name, uri)
    result = invoke_rest_method(RequestDescriptor(
        uri_fragment=f"repos/{encode_segment(owner)}/{encode_segment(repository)}/issues/{encode_segment(issue)}/labels",
        method=HttpMethod.POST,
        body={"labels": labels},
        access_token=access_token,
        description=f"Adding labels to issue {issue} in {repository}",
        **telemetry_args("add_issue_label", OwnerName=owner, RepositoryName=repository),
    ))
    return add_additional_properties(result, {
        "RepositoryUrl": get_repository_url(owner, repository),
        "IssueNumber": issue,
        "LabelName": lambda item: item.get("name"),
    })
