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

import re
from typing import Optional

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

LABEL_ACCEPT_HEADER = "application/vnd.github.symmetra-preview+json"

_COLOR_PATTERN = re.compile(r'^[0-9a-fA-F]{6}$')


def normalize_color(color: str) -> str:
    """Returns the six hex digit color GitHub expects, without a leading '#'."""
    normalized = color.lstrip('#') if color else color
    if not normalized or not _COLOR_PATTERN.match(normalized):
        raise GitHubValidationError(f"'{color}' is not a valid label color. Use six hex digits, e.g. 'd73a4a'.",
                                    color)
    return normalized.lower()


def _decorate(result, owner: str, repository: str):
    return add_additional_properties(result, {
        "RepositoryUrl": get_repository_url(owner, repository),
        "LabelId": lambda item: item.get("id"),
        "LabelName": lambda item: item.get("name"),
    })


def get_label(owner_name: Optional[str] = None, repository_name: Optional[str] = None,
              uri: Optional[str] = None, label: Optional[str] = None,
              access_token: Optional[str] = None):
    """Gets one label by name, or every label in the repository."""
    owner, repository = resolve_repository_elements(owner_name, repository_name, uri)
    base = f"repos/{encode_segment(owner)}/{encode_segment(repository)}/labels"

    if label:
        result = invoke_rest_method(RequestDescriptor(
            uri_fragment=f"{base}/{encode_segment(label)}",
            accept_header=LABEL_ACCEPT_HEADER,
            access_token=access_token,
            description=f"Getting label {label} for {repository}",
            **telemetry_args("get_label", OwnerName=owner, RepositoryName=repository, LabelName=label),
        ))
    else:
        result = invoke_rest_method_multiple_result(RequestDescriptor(
            uri_fragment=base,
            accept_header=LABEL_ACCEPT_HEADER,
            access_token=access_token,
            description=f"Getting labels for {repository}",
            **telemetry_args("get_label", OwnerName=owner, RepositoryName=repository),
        ))
    return _decorate(result, owner, repository)


def new_label(label: str, color: str, description: Optional[str] = None,
              owner_name: Optional[str] = None, repository_name: Optional[str] = None,
              uri: Optional[str] = None, access_token: Optional[str] = None):
    """Creates a label."""
    owner, repository = resolve_repository_elements(owner_name, repository_name, uri)
    body = {"name": label, "color": normalize_color(color)}
    if description is not None:
        body["description"] = description

    result = invoke_rest_method(RequestDescriptor(
        uri_fragment=f"repos/{encode_segment(owner)}/{encode_segment(repository)}/labels",
        method=HttpMethod.POST,
        body=body,
        accept_header=LABEL_ACCEPT_HEADER,
        access_token=access_token,
        description=f"Creating label {label} in {repository}",
        **telemetry_args("new_label", OwnerName=owner, RepositoryName=repository),
    ))
    return _decorate(result, owner, repository)


def set_label(label: str, new_name: Optional[str] = None, color: Optional[str] = None,
              description: Optional[str] = None, owner_name: Optional[str] = None,
              repository_name: Optional[str] = None, uri: Optional[str] = None,
              access_token: Optional[str] = None):
    """Updates the name, color or description of an existing label."""
    owner, repository = resolve_repository_elements(owner_name, repository_name, uri)
    body = {}
    if new_name:
        body["new_name"] = new_name
    if color:
        body["color"] = normalize_color(color)
    if description is not None:
        body["description"] = description
    if not body:
        raise GitHubValidationError("Nothing to update: provide a new name, color or description.", label)

    result = invoke_rest_method(RequestDescriptor(
        uri_fragment=f"repos/{encode_segment(owner)}/{encode_segment(repository)}/labels/{encode_segment(label)}",
        method=HttpMethod.PATCH,
        body=body,
        accept_header=LABEL_ACCEPT_HEADER,
        access_token=access_token,
        description=f"Updating label {label} in {repository}",
        **telemetry_args("set_label", OwnerName=owner, RepositoryName=repository),
    ))
    return _decorate(result, owner, repository)


def remove_label(label: str, owner_name: Optional[str] = None, repository_name: Optional[str] = None,
                 uri: Optional[str] = None, access_token: Optional[str] = None) -> None:
    owner, repository = resolve_repository_elements(owner_name, repository_name, uri)
    invoke_rest_method(RequestDescriptor(
        uri_fragment=f"repos/{encode_segment(owner)}/{encode_segment(repository)}/labels/{encode_segment(label)}",
        method=HttpMethod.DELETE,
        accept_header=LABEL_ACCEPT_HEADER,
        access_token=access_token,
        description=f"Deleting label {label} from {repository}",
        **telemetry_args("remove_label", OwnerName=owner, RepositoryName=repository),
    ))
