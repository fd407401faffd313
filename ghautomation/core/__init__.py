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

"""Core HTTP Invocation

This package contains the request/response plumbing shared by every command:
URL and header construction, single and multi-page REST invocation, GraphQL
invocation, access token resolution and structured error translation.

Key Components:
- invoke_rest_method: One REST call, one parsed result
- invoke_rest_method_multiple_result: Follows Link headers across pages
- invoke_graphql: GraphQL call with payload-level error detection
- GitHubError: The single error type raised to callers
"""

from .authentication import (
    clear_github_authentication,
    get_access_token,
    is_github_authentication_configured,
    set_github_authentication,
)
from .errors import GitHubError, GitHubValidationError
from .graphql import invoke_graphql
from .invoker import invoke_rest_method
from .pagination import invoke_rest_method_multiple_result
from .request import ExtendedResult, HttpMethod, RequestDescriptor

__all__ = [
    "ExtendedResult",
    "GitHubError",
    "GitHubValidationError",
    "HttpMethod",
    "RequestDescriptor",
    "clear_github_authentication",
    "get_access_token",
    "invoke_graphql",
    "invoke_rest_method",
    "invoke_rest_method_multiple_result",
    "is_github_authentication_configured",
    "set_github_authentication",
]
