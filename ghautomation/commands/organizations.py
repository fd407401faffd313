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
    GitHubError,
    GitHubValidationError,
    RequestDescriptor,
    invoke_rest_method,
    invoke_rest_method_multiple_result,
)
from ghautomation.shared.error_categories import ErrorCategory
from ghautomation.utils import debug_log


def get_organization(organization_name: str, access_token: Optional[str] = None):
    if not organization_name:
        raise GitHubValidationError("An organization name is required.")
    result = invoke_rest_method(RequestDescriptor(
        uri_fragment=f"orgs/{encode_segment(organization_name)}",
        access_token=access_token,
        description=f"Getting organization {organization_name}",
        **telemetry_args("get_organization", OrganizationName=organization_name),
    ))
    return add_additional_properties(result, {"OrganizationName": lambda item: item.get("login")})


def get_organization_member(organization_name: str, access_token: Optional[str] = None):
    """Lists the members of an organization."""
    if not organization_name:
        raise GitHubValidationError("An organization name is required.")
    result = invoke_rest_method_multiple_result(RequestDescriptor(
        uri_fragment=f"orgs/{encode_segment(organization_name)}/members",
        access_token=access_token,
        description=f"Getting members for {organization_name}",
        **telemetry_args("get_organization_member", OrganizationName=organization_name),
    ))
    return add_additional_properties(result, {
        "OrganizationName": organization_name,
        "UserName": lambda item: item.get("login"),
    })


def is_organization_member(organization_name: str, user_name: str, access_token: Optional[str] = None) -> bool:
    """
    Checks whether a user is a member of an organization.

    The membership endpoint answers 204 for a member and 404 for anyone else,
    so the call is made in extended result mode and the status code decides.
    """
    if not organization_name or not user_name:
        raise GitHubValidationError("An organization name and a user name are required.")

    try:
        response = invoke_rest_method(RequestDescriptor(
            uri_fragment=f"orgs/{encode_segment(organization_name)}/members/{encode_segment(user_name)}",
            access_token=access_token,
            extended_result=True,
            description=f"Checking if {user_name} is a member of {organization_name}",
            **telemetry_args("is_organization_member", OrganizationName=organization_name),
        ))
    except GitHubError as e:
        if e.category == ErrorCategory.NOT_FOUND:
            debug_log(f"{user_name} is not a member of {organization_name}")
            return False
        raise

    return response.status_code == 204
