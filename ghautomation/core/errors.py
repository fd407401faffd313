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
Structured errors raised by the core.

Every failed call surfaces as a single GitHubError carrying a multi-line
message, an ErrorCategory, the request correlation id (when GitHub sent one)
and the object the request was about.
"""

import json
from typing import Any, Optional

import requests

from ghautomation.shared.error_categories import ErrorCategory

REQUEST_ID_HEADER = "X-GitHub-Request-Id"


class GitHubError(Exception):
    """Custom exception for any failed GitHub call."""
    def __init__(self, message: str, category: ErrorCategory = ErrorCategory.UNSPECIFIED,
                 original_exception: Optional[BaseException] = None, request_id: Optional[str] = None,
                 target_object: Any = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.category = category
        self.original_exception = original_exception
        self.request_id = request_id
        self.target_object = target_object
        self.status_code = status_code


class GitHubValidationError(GitHubError):
    """Raised for invalid or conflicting parameters, before any network call."""
    def __init__(self, message: str, target_object: Any = None):
        super().__init__(message, category=ErrorCategory.INVALID_ARGUMENT, target_object=target_object)


def classify_transport_exception(exception: requests.exceptions.RequestException) -> ErrorCategory:
    """Maps a requests transport exception to an error category."""
    # SSLError and ConnectTimeout are both ConnectionError subclasses, so order matters.
    if isinstance(exception, requests.exceptions.SSLError):
        return ErrorCategory.SECURITY_ERROR
    if isinstance(exception, requests.exceptions.Timeout):
        return ErrorCategory.OPERATION_TIMEOUT
    if isinstance(exception, requests.exceptions.ConnectionError):
        return ErrorCategory.CONNECTION_ERROR
    return ErrorCategory.UNSPECIFIED


def classify_status_code(status_code: Optional[int]) -> ErrorCategory:
    if status_code == 404:
        return ErrorCategory.NOT_FOUND
    if status_code is None:
        return ErrorCategory.UNSPECIFIED
    return ErrorCategory.INVALID_OPERATION


def get_request_id(response) -> Optional[str]:
    if response is None or response.headers is None:
        return None
    return response.headers.get(REQUEST_ID_HEADER)


def _format_error_detail(detail: Any) -> str:
    """Renders one entry of GitHub's `errors` table."""
    if not isinstance(detail, dict):
        return str(detail)
    parts = []
    for key in ("resource", "field", "code", "message"):
        if detail.get(key):
            parts.append(f"{key}: {detail[key]}")
    if not parts:
        return json.dumps(detail)
    return ", ".join(parts)


def build_http_error_message(exception: BaseException, response) -> str:
    """
    Composes the human-readable message for an HTTP error response.

    Lines, in order: the exception text; the API message and documentation
    link; a Details block built from the API's `errors` table; the request id.
    """
    lines = [str(exception)]

    payload = None
    if response is not None:
        try:
            payload = response.json()
        except ValueError:
            payload = None

    if isinstance(payload, dict):
        message = payload.get("message")
        documentation_url = payload.get("documentation_url")
        if message and documentation_url:
            lines.append(f"{message} | {documentation_url}")
        elif message:
            lines.append(message)
        elif documentation_url:
            lines.append(documentation_url)

        details = payload.get("errors") or payload.get("details")
        if details:
            lines.append("Details:")
            if not isinstance(details, list):
                details = [details]
            for detail in details:
                lines.append(f"  {_format_error_detail(detail)}")

    request_id = get_request_id(response)
    if request_id:
        lines.append(f"RequestId: {request_id}")

    return "\n".join(lines)


def from_http_error(exception: requests.exceptions.HTTPError, target_object: Any = None) -> GitHubError:
    """Translates an HTTPError (raised by raise_for_status) into a GitHubError."""
    response = exception.response
    status_code = response.status_code if response is not None else None
    return GitHubError(
        build_http_error_message(exception, response),
        category=classify_status_code(status_code),
        original_exception=exception,
        request_id=get_request_id(response),
        target_object=target_object,
        status_code=status_code,
    )


def from_transport_error(exception: requests.exceptions.RequestException, target_object: Any = None) -> GitHubError:
    """Translates a connection/timeout/TLS failure into a GitHubError."""
    return GitHubError(
        str(exception),
        category=classify_transport_exception(exception),
        original_exception=exception,
        target_object=target_object,
    )


def from_graphql_errors(errors: list, response, target_object: Any = None) -> GitHubError:
    """Builds the error for an HTTP 200 GraphQL response that carries an `errors` array."""
    first_error = errors[0] if isinstance(errors[0], dict) else {"message": str(errors[0])}
    error_type = first_error.get("type")
    if not error_type:
        category = ErrorCategory.UNSPECIFIED
    elif error_type == "NOT_FOUND":
        category = ErrorCategory.NOT_FOUND
    else:
        category = ErrorCategory.INVALID_OPERATION

    lines = [first_error.get("message") or "The GraphQL query returned an error."]
    request_id = get_request_id(response)
    if request_id:
        lines.append(f"RequestId: {request_id}")

    return GitHubError(
        "\n".join(lines),
        category=category,
        request_id=request_id,
        target_object=target_object,
        status_code=response.status_code if response is not None else None,
    )
