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
from ghautomation.core import RequestDescriptor, invoke_graphql, invoke_rest_method

VIEWER_LOGIN_QUERY = "query { viewer { login } }"


def get_rate_limit(access_token: Optional[str] = None):
    """Current rate limit status for the authenticated (or anonymous) caller."""
    return invoke_rest_method(RequestDescriptor(
        uri_fragment="rate_limit",
        access_token=access_token,
        description="Getting rate limit status",
        **telemetry_args("get_rate_limit"),
    ))


def get_user(user_name: Optional[str] = None, access_token: Optional[str] = None):
    """Gets a user by login, or the authenticated user when no login is given."""
    fragment = f"users/{encode_segment(user_name)}" if user_name else "user"
    result = invoke_rest_method(RequestDescriptor(
        uri_fragment=fragment,
        access_token=access_token,
        description=f"Getting user {user_name or '(current)'}",
        **telemetry_args("get_user"),
    ))
    return add_additional_properties(result, {"UserName": lambda item: item.get("login")})


def get_viewer_login(access_token: Optional[str] = None) -> Optional[str]:
    data = invoke_graphql(
        VIEWER_LOGIN_QUERY,
        access_token=access_token,
        description="Getting the login of the current user",
        telemetry_event_name="get_viewer_login",
        telemetry_exception_bucket="get_viewer_login",
    )
    return ((data or {}).get("viewer") or {}).get("login")
