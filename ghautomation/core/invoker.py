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
Single-request REST invocation.

invoke_rest_method() is the one place that talks to the GitHub REST API:
it builds the URL and headers, sends the request with requests, parses the
JSON body and turns every failure into a GitHubError.
"""

import json
import re
import time
from typing import Any, Dict, Optional
from urllib.parse import parse_qs, urlparse

import requests

from ghautomation.config import get_config
from ghautomation.core.authentication import get_access_token
from ghautomation.core.errors import GitHubError, from_http_error, from_transport_error
from ghautomation.core.request import ExtendedResult, HttpMethod, RequestDescriptor
from ghautomation.shared.error_categories import ErrorCategory
from ghautomation.telemetry import get_telemetry_handler
from ghautomation.utils import debug_log, log

_LINK_PATTERN = re.compile(r'<(?P<url>[^>]*)>\s*;\s*rel="(?P<rel>[^"]*)"')

_no_token_warning_shown = False


def build_rest_url(uri_fragment: str, config=None) -> str:
    """
    Combines the configured API host with a URI fragment.

    github.com is served from https://api.github.com/<fragment>; any other
    host is treated as GitHub Enterprise: https://<host>/api/v3/<fragment>.
    Absolute URLs (pagination links) are returned unchanged.
    """
    if uri_fragment.startswith(("https://", "http://")):
        return uri_fragment

    config = config or get_config()
    fragment = uri_fragment.lstrip('/')
    if config.is_enterprise:
        return f"https://{config.api_host_name}/api/v3/{fragment}"
    return f"https://api.{config.api_host_name}/{fragment}"


def build_headers(access_token: str, accept_header: Optional[str] = None,
                  has_body: bool = False, config=None) -> Dict[str, str]:
    """Generate the headers for a GitHub API call."""
    config = config or get_config()
    headers = {
        "User-Agent": config.USER_AGENT,
        "Accept": accept_header or config.DEFAULT_ACCEPT_HEADER,
    }
    if access_token:
        headers["Authorization"] = f"token {access_token}"
    if has_body:
        headers["Content-Type"] = "application/json; charset=UTF-8"
    return headers


def serialize_body(body: Any) -> Optional[bytes]:
    """Serializes a request body as UTF-8 JSON bytes. Strings are assumed to be JSON already."""
    if body is None:
        return None
    if isinstance(body, bytes):
        return body
    if isinstance(body, str):
        return body.encode("utf-8")
    return json.dumps(body).encode("utf-8")


def parse_link_header(link_header: Optional[str]) -> Dict[str, str]:
    """
    Parses a Link header of comma-separated `<url>; rel="reltype"` entries into {rel: url}.

    The header is matched as a whole rather than split on commas, since a
    linked URL may itself contain a raw comma (e.g. ?labels=bug,ui).
    """
    links = {}
    if not link_header:
        return links
    for match in _LINK_PATTERN.finditer(link_header):
        links[match.group("rel")] = match.group("url")
    return links


def get_next_link(link_header: Optional[str]) -> Optional[str]:
    """
    Returns the rel="next" URL, or None when there is no further page.

    A next link that points at page 1 is ignored: GitHub has been seen to
    return one on the first response of some endpoints, and following it
    would fetch the first page again.
    """
    next_link = parse_link_header(link_header).get("next")
    if not next_link:
        return None

    page = parse_qs(urlparse(next_link).query).get("page")
    if page and page[0] == "1":
        debug_log(f"Ignoring next link that points back to page 1: {next_link}")
        return None
    return next_link


def _warn_if_anonymous(access_token: str, config) -> None:
    global _no_token_warning_shown
    if access_token or config.suppress_no_token_warning or _no_token_warning_shown:
        return
    _no_token_warning_shown = True
    log("This request was made anonymously and is subject to lower rate limits. "
        "Use set_github_authentication or GITHUB_TOKEN to configure an access token.", is_warning=True)


def _parse_response_body(response, url: str, target_object: Any) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError as e:
        raise GitHubError(
            f"Unable to parse the response from {url} as JSON: {e}",
            category=ErrorCategory.INVALID_OPERATION,
            original_exception=e,
            target_object=target_object,
            status_code=response.status_code,
        ) from e


def execute_request(descriptor: RequestDescriptor, config=None, session=None) -> ExtendedResult:
    """
    Performs one HTTP call and returns the parsed body with its metadata.

    Args:
        descriptor: The request to send
        config: Optional configuration; defaults to get_config()
        session: Optional requests.Session to send through

    Returns:
        ExtendedResult: parsed body, status, headers and pagination links

    Raises:
        GitHubError: On any transport failure, HTTP error status or unparseable body
    """
    if not descriptor.uri_fragment:
        raise GitHubError("A URI fragment is required.", category=ErrorCategory.INVALID_ARGUMENT,
                          target_object=descriptor)

    config = config or get_config()
    url = build_rest_url(descriptor.uri_fragment, config)
    access_token = get_access_token(descriptor.access_token, config)
    _warn_if_anonymous(access_token, config)

    body_bytes = serialize_body(descriptor.body)
    headers = build_headers(access_token, descriptor.accept_header, body_bytes is not None, config)
    timeout = descriptor.timeout_seconds if descriptor.timeout_seconds is not None else config.request_timeout
    target_object = descriptor.body if descriptor.body is not None else url

    debug_log(f"Executing: {descriptor.method.value} {url}")
    if descriptor.description:
        debug_log(f"  {descriptor.description}")
    if body_bytes is not None and config.log_request_body:
        debug_log(f"  Request body: {body_bytes.decode('utf-8', errors='replace')}")

    sender = session if session is not None else requests
    try:
        response = sender.request(
            descriptor.method.value,
            url,
            headers=headers,
            data=body_bytes,
            timeout=timeout or None,
        )
        response.raise_for_status()
    except requests.exceptions.HTTPError as e:
        raise from_http_error(e, target_object) from e
    except requests.exceptions.RequestException as e:
        raise from_transport_error(e, target_object) from e

    debug_log(f"  Response status: {response.status_code}")
    result = _parse_response_body(response, url, target_object)
    link = response.headers.get("Link") if response.headers is not None else None
    return ExtendedResult(
        result=result,
        status_code=response.status_code,
        status_description=response.reason or "",
        headers=response.headers,
        next_link=get_next_link(link),
        link=link,
    )


def report_success(descriptor: RequestDescriptor, started_at: float, metrics: Optional[Dict[str, float]] = None) -> None:
    """Sends the success event for a call, if the caller asked for one."""
    if not descriptor.telemetry_event_name:
        return
    all_metrics = {"Duration": round((time.monotonic() - started_at) * 1000, 2)}
    all_metrics.update(metrics or {})
    try:
        get_telemetry_handler().send_event(descriptor.telemetry_event_name,
                                           descriptor.telemetry_properties, all_metrics)
    except Exception as e:
        debug_log(f"Telemetry event {descriptor.telemetry_event_name} was not sent: {e}")


def report_failure(descriptor: RequestDescriptor, error: GitHubError) -> None:
    """Sends the exception for a failed call, if the caller named a bucket for it."""
    if not descriptor.telemetry_exception_bucket:
        return
    try:
        get_telemetry_handler().send_exception(error, descriptor.telemetry_exception_bucket,
                                               descriptor.telemetry_properties)
    except Exception as e:
        debug_log(f"Telemetry exception {descriptor.telemetry_exception_bucket} was not sent: {e}")


def invoke_rest_method(descriptor: RequestDescriptor, config=None) -> Any:
    """
    Invokes a GitHub REST endpoint and returns a single page of results.

    Returns the parsed JSON body (None for an empty body), or an
    ExtendedResult when descriptor.extended_result is set.

    Raises:
        GitHubError: If the call fails for any reason
    """
    started_at = time.monotonic()
    try:
        extended = execute_request(descriptor, config)
    except GitHubError as e:
        debug_log(f"{descriptor.method.value} {descriptor.uri_fragment} failed:\n{e.message}")
        report_failure(descriptor, e)
        raise

    report_success(descriptor, started_at)
    if descriptor.extended_result:
        return extended
    return extended.result


__all__ = [
    "HttpMethod",
    "RequestDescriptor",
    "build_headers",
    "build_rest_url",
    "execute_request",
    "get_next_link",
    "invoke_rest_method",
    "parse_link_header",
    "report_failure",
    "report_success",
    "serialize_body",
]
