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

from ghautomation.commands.common import add_additional_properties, encode_segment, telemetry_args
from ghautomation.core import (
    GitHubValidationError,
    HttpMethod,
    RequestDescriptor,
    invoke_rest_method,
    invoke_rest_method_multiple_result,
)

PROJECT_ACCEPT_HEADER = "application/vnd.github.inertia-preview+json"


def get_project_column(project_id: int, column_id: Optional[int] = None, access_token: Optional[str] = None):
    """Gets one column by id, or every column of a project."""
    if column_id is not None:
        result = invoke_rest_method(RequestDescriptor(
            uri_fragment=f"projects/columns/{encode_segment(column_id)}",
            accept_header=PROJECT_ACCEPT_HEADER,
            access_token=access_token,
            description=f"Getting project column {column_id}",
            **telemetry_args("get_project_column"),
        ))
    else:
        result = invoke_rest_method_multiple_result(RequestDescriptor(
            uri_fragment=f"projects/{encode_segment(project_id)}/columns",
            accept_header=PROJECT_ACCEPT_HEADER,
            access_token=access_token,
            description=f"Getting columns for project {project_id}",
            **telemetry_args("get_project_column"),
        ))

    return add_additional_properties(result, {
        "ProjectId": project_id,
        "ColumnId": lambda item: item.get("id"),
        "ColumnName": lambda item: item.get("name"),
    })


def build_column_position(first: bool = False, last: bool = False, after_column_id: Optional[int] = None) -> str:
    """
    Translates the move options into GitHub's position string.

    Raises:
        GitHubValidationError: Unless exactly one option is given
    """
    chosen = [option for option in (first, last, after_column_id is not None) if option]
    if len(chosen) != 1:
        raise GitHubValidationError("Specify exactly one of first, last or after_column_id.")
    if first:
        return "first"
    if last:
        return "last"
    return f"after:{after_column_id}"


def move_project_column(column_id: int, first: bool = False, last: bool = False,
                        after_column_id: Optional[int] = None, access_token: Optional[str] = None) -> None:
    position = build_column_position(first, last, after_column_id)
    invoke_rest_method(RequestDescriptor(
        uri_fragment=f"projects/columns/{encode_segment(column_id)}/moves",
        method=HttpMethod.POST,
        body={"position": position},
        accept_header=PROJECT_ACCEPT_HEADER,
        access_token=access_token,
        description=f"Moving project column {column_id} to {position}",
        **telemetry_args("move_project_column"),
    ))
