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
Request and response value types shared by the invokers.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class HttpMethod(Enum):
    GET = "GET"
    POST = "POST"
    PATCH = "PATCH"
    PUT = "PUT"
    DELETE = "DELETE"


@dataclass
class RequestDescriptor:
    """
    Everything the core needs to issue one logical GitHub REST call.

    Built fresh by a command for each call and never persisted.
    """
    uri_fragment: str
    method: HttpMethod = HttpMethod.GET
    body: Optional[Any] = None
    accept_header: Optional[str] = None
    access_token: Optional[str] = None
    timeout_seconds: Optional[int] = None
    extended_result: bool = False
    description: str = ""
    telemetry_event_name: Optional[str] = None
    telemetry_exception_bucket: Optional[str] = None
    telemetry_properties: Dict[str, Any] = field(default_factory=dict)


@dataclass
class ExtendedResult:
    """Parsed body together with the response metadata."""
    result: Any
    status_code: int
    status_description: str
    headers: Dict[str, str]
    next_link: Optional[str] = None
    link: Optional[str] = None
