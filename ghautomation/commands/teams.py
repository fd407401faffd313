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
    RequestDescriptor,
    invoke_rest_method,
    invoke_rest_method_multiple_result,
)


def _decorate(result, organization_name: str):
    return add_additional_properties(result, {
        "OrganizationName": organization_name,
        "TeamId": lambda item: item.get("id"),
        "TeamName": lambda item: item.get("name"),
        "TeamSlug": lambda item: item.get("slug"),
    })


def get_team(organization_name: str, team_slug: Optional[str] = None, access_token: Optional[str] = None):
    """Gets one team by slug, or every team in the organization."""
    if not organization_name:
        raise GitHubValidationError("An organization name is required.")
    base = f"orgs/{encode_segment(organization_name)}/teams"

    if team_slug:
        result = invoke_rest_method(RequestDescriptor(
            uri_fragment=f"{base}/{encode_segment(team_slug)}",
            access_token=access_token,
            description=f"Getting team {team_slug} in {organization_name}",
            **telemetry_args("get_team", OrganizationName=organization_name),
        ))
    else:
        result = invoke_rest_method_multiple_result(RequestDescriptor(
            uri_fragment=base,
            access_token=access_token,
            description=f"Getting teams in {organization_name}",
            **telemetry_args("get_team", OrganizationName=organization_name),
        ))
    return _decorate(result, organization_name)


def get_team_member(organization_name: str, team_slug: str, access_token: Optional[str] = None):
    if not organization_name or not team_slug:
        raise GitHubValidationError("An organization name and a team slug are required.")
    result = invoke_rest_method_multiple_result(RequestDescriptor(
        uri_fragment=f"orgs/{encode_segment(organization_name)}/teams/{encode_segment(team_slug)}/members",
        access_token=access_token,
        description=f"Getting members of team {team_slug}",
        **telemetry_args("get_team_member", OrganizationName=organization_name, TeamSlug=team_slug),
    ))
    return add_additional_properties(result, {
        "OrganizationName": organization_name,
        "TeamSlug": team_slug,
        "UserName": lambda item: item.get("login"),
    })
