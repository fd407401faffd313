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

from ghautomation.commands.common import (
    add_additional_properties,
    encode_segment,
    get_repository_url,
    resolve_repository_elements,
    telemetry_args,
)
from ghautomation.core import RequestDescriptor, invoke_rest_method, invoke_rest_method_multiple_result


def get_branch(owner_name: Optional[str] = None, repository_name: Optional[str] = None,
               uri: Optional[str] = None, branch: Optional[str] = None, protected_only: bool = False,
               access_token: Optional[str] = None):
    """Gets one branch by name, or all branches (optionally only protected ones)."""
    owner, repository = resolve_repository_elements(owner_name, repository_name, uri)
    base = f"repos/{encode_segment(owner)}/{encode_segment(repository)}/branches"

    if branch:
        result = invoke_rest_method(RequestDescriptor(
            uri_fragment=f"{base}/{encode_segment(branch)}",
            access_token=access_token,
            description=f"Getting branch {branch} for {repository}",
            **telemetry_args("get_branch", OwnerName=owner, RepositoryName=repository),
        ))
    else:
        fragment = f"{base}?protected=true" if protected_only else base
        result = invoke_rest_method_multiple_result(RequestDescriptor(
            uri_fragment=fragment,
            access_token=access_token,
            description=f"Getting branches for {repository}",
            **telemetry_args("get_branch", OwnerName=owner, RepositoryName=repository),
        ))

    return add_additional_properties(result, {
        "RepositoryUrl": get_repository_url(owner, repository),
        "BranchName": lambda item: item.get("name"),
        "Sha": lambda item: (item.get("commit") or {}).get("sha"),
    })
