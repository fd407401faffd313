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

import time
from dataclasses import replace
from typing import Any, List, Optional

from ghautomation.core.errors import GitHubError
from ghautomation.core.invoker import execute_request, report_failure, report_success
from ghautomation.core.request import RequestDescriptor
from ghautomation.utils import debug_log


def invoke_rest_method_multiple_result(descriptor: RequestDescriptor, single_page: bool = False,
                                       config=None, items_key: Optional[str] = None) -> List[Any]:
    """
    Invokes a paged GitHub REST endpoint and returns every item from every page.

    Follows the rel="next" link of each response until none is left, keeping
    server page order and the order within each page. If any page fails the
    GitHubError is raised and the pages fetched so far are discarded.

    Args:
        descriptor: The request for the first page
        single_page: Stop after the first page even if more are available
        config: Optional configuration; defaults to get_config()
        items_key: For endpoints that wrap each page as {"total_count": n, <key>: [...]},
            the key holding that page's items

    Returns:
        list: All items, in order
    """
    started_at = time.monotonic()
    results: List[Any] = []
    page_count = 0
    next_descriptor = descriptor

    try:
        while next_descriptor is not None:
            page = execute_request(next_descriptor, config)
            page_count += 1

            page_items = page.result
            if items_key and isinstance(page_items, dict):
                page_items = page_items.get(items_key) or []

            if isinstance(page_items, list):
                results.extend(page_items)
            elif page_items is not None:
                results.append(page_items)

            if single_page or not page.next_link:
                break

            debug_log(f"Getting additional results: {page.next_link}")
            next_descriptor = replace(next_descriptor, uri_fragment=page.next_link)
    except GitHubError as e:
        debug_log(f"Multi-page request {descriptor.uri_fragment} failed on page {page_count + 1}; "
                  f"discarding {len(results)} items already fetched.")
        report_failure(descriptor, e)
        raise

    report_success(descriptor, started_at, {"PageCount": page_count})
    return results
