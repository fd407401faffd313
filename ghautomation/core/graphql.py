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
GraphQL invocation.

GraphQL reports most failures inside an HTTP 200 response, so success is
decided by inspecting the parsed `errors` array rather than the status code.
Each call runs on its own requests.Session whose HTTPS adapter requires
TLS 1.2 or newer; nothing process-wide is changed.
"""

import ssl
import time
from typing import Any, Dict, Optional

import requests
from requests.adapters import HTTPAdapter
from requests.utils import DEFAULT_CA_BUNDLE_PATH

from ghautomation.config import get_config
from ghautomation.core.errors import GitHubError, from_graphql_errors, get_request_id
from ghautomation.core.invoker import execute_request, report_failure, report_success
from ghautomation.core.request import HttpMethod, RequestDescriptor
from ghautomation.shared.error_categories import ErrorCategory
from ghautomation.utils import debug_log

MINIMUM_TLS_VERSION = ssl.TLSVersion.TLSv1_2


class MinimumTlsAdapter(HTTPAdapter):
    """HTTPS adapter whose connections refuse anything older than minimum_version."""

    def __init__(self, minimum_version: ssl.TLSVersion = MINIMUM_TLS_VERSION, **kwargs):
        # HTTPAdapter.__init__ builds the pool manager, which reads this.
        self.minimum_version = minimum_version
        super().__init__(**kwargs)

    def _ssl_context(self) -> ssl.SSLContext:
        context = ssl.create_default_context(cafile=DEFAULT_CA_BUNDLE_PATH)
        context.minimum_version = self.minimum_version
        return context

    def init_poolmanager(self, *args, **kwargs):
        kwargs["ssl_context"] = self._ssl_context()
        return super().init_poolmanager(*args, **kwargs)

    def proxy_manager_for(self, *args, **kwargs):
        kwargs["ssl_context"] = self._ssl_context()
        return super().proxy_manager_for(*args, **kwargs)


def build_secure_session(minimum_version: ssl.TLSVersion = MINIMUM_TLS_VERSION) -> requests.Session:
    """Creates a session that only negotiates TLS at or above minimum_version."""
    session = requests.Session()
    session.mount("https://", MinimumTlsAdapter(minimum_version))
    return session


def build_graphql_url(config=None) -> str:
    config = config or get_config()
    if config.is_enterprise:
        return f"https://{config.api_host_name}/api/v3/graphql"
    return f"https://api.{config.api_host_name}/graphql"


def invoke_graphql(query: str, variables: Optional[Dict[str, Any]] = None,
                   access_token: Optional[str] = None, description: str = "",
                   timeout_seconds: Optional[int] = None,
                   telemetry_event_name: Optional[str] = None,
                   telemetry_exception_bucket: Optional[str] = None,
                   telemetry_properties: Optional[Dict[str, Any]] = None,
                   config=None) -> Any:
    """
    Sends a GraphQL query or mutation and returns its `data` payload.

    Args:
        query: The GraphQL document
        variables: Optional variables for the document
        access_token: Token for this call; defaults to the configured token

    Returns:
        The `data` member of the response

    Raises:
        GitHubError: On transport/HTTP failure, or when the response has a non-empty `errors` array
    """
    config = config or get_config()
    body = {"query": query}
    if variables:
        body["variables"] = variables

    descriptor = RequestDescriptor(
        uri_fragment=build_graphql_url(config),
        method=HttpMethod.POST,
        body=body,
        access_token=access_token,
        timeout_seconds=timeout_seconds,
        description=description,
        telemetry_event_name=telemetry_event_name,
        telemetry_exception_bucket=telemetry_exception_bucket,
        telemetry_properties=telemetry_properties or {},
    )

    started_at = time.monotonic()
    try:
        with build_secure_session() as session:
            response = execute_request(descriptor, config, session=session)

        payload = response.result
        if not isinstance(payload, dict):
            raise GitHubError(
                "The GraphQL response was not a JSON object.",
                category=ErrorCategory.INVALID_OPERATION,
                request_id=get_request_id(response),
                target_object=body,
                status_code=response.status_code,
            )
        errors = payload.get("errors")
        if errors:
            raise from_graphql_errors(errors, response, target_object=body)
    except GitHubError as e:
        debug_log(f"GraphQL request failed:\n{e.message}")
        report_failure(descriptor, e)
        raise

    report_success(descriptor, started_at)
    return payload.get("data")

