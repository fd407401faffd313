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
Deployment environments. Creating an environment that already exists
updates it in place, so new_deployment_environment is also the update path.
"""

from typing import List, Optional

from ghautomation.commands.common import (
    add_additional_properties,
    encode_segment,
    get_repository_url,
    resolve_repository_elements,
    telemetry_args,
)
from ghautomation.core import (
    GitHubValidationError,
    HttpMethod,
    RequestDescriptor,
    invoke_rest_method,
    invoke_rest_method_multiple_result,
)

MAX_WAIT_TIMER_MINUTES = 43200
MAX_REVIEWERS = 6
VALID_REVIEWER_TYPES = ("User", "Team")


def _decorate(result, owner: str, repository: str):
    return add_additional_properties(result, {
        "RepositoryUrl": get_repository_url(owner, repository),
        "EnvironmentName": lambda item: item.get("name"),
    })


def _environments_fragment(owner: str, repository: str) -> str:
    return f"repos/{encode_segment(owner)}/{encode_segment(repository)}/environments"


def get_deployment_environment(owner_name: Optional[str] = None, repository_name: Optional[str] = None,
                               uri: Optional[str] = None, environment_name: Optional[str] = None,
                               access_token: Optional[str] = None):
    """Gets one environment by name, or all environments of the repository."""
    owner, repository = resolve_repository_elements(owner_name, repository_name, uri)
    base = _environments_fragment(owner, repository)

    if environment_name:
        result = invoke_rest_method(RequestDescriptor(
            uri_fragment=f"{base}/{encode_segment(environment_name)}",
            access_token=access_token,
            description=f"Getting environment {environment_name} for {repository}",
            **telemetry_args("get_deployment_environment", OwnerName=owner, RepositoryName=repository),
        ))
        return _decorate(result, owner, repository)

    # Each page of the list endpoint is wrapped as {"total_count": n, "environments": [...]}
    environments = invoke_rest_method_multiple_result(RequestDescriptor(
        uri_fragment=base,
        access_token=access_token,
        description=f"Getting environments for {repository}",
        **telemetry_args("get_deployment_environment", OwnerName=owner, RepositoryName=repository),
    ), items_key="environments")
    return _decorate(environments, owner, repository)


def _build_reviewers(reviewers: List[dict]) -> List[dict]:
    if len(reviewers) > MAX_REVIEWERS:
        raise GitHubValidationError(f"At most {MAX_REVIEWERS} reviewers can be configured.", reviewers)
    built = []
    for reviewer in reviewers:
        reviewer_type = reviewer.get("type")
        if reviewer_type not in VALID_REVIEWER_TYPES or reviewer.get("id") is None:
            raise GitHubValidationError(
                f"Each reviewer needs an id and a type of {' or '.join(VALID_REVIEWER_TYPES)}.", reviewer)
        built.append({"type": reviewer_type, "id": reviewer["id"]})
    return built


def new_deployment_environment(environment_name: str, wait_timer: Optional[int] = None,
                               reviewers: Optional[List[dict]] = None,
                               protected_branches_only: bool = False, custom_branch_policies: bool = False,
                               owner_name: Optional[str] = None, repository_name: Optional[str] = None,
                               uri: Optional[str] = None, access_token: Optional[str] = None):
    """
    Creates or updates a deployment environment.

    Args:
        environment_name: Name of the environment
        wait_timer: Minutes to wait before a deployment proceeds (0-43200)
        reviewers: Up to six dicts of {"type": "User"|"Team", "id": int}
        protected_branches_only: Only allow deployments from protected branches
        custom_branch_policies: Only allow branches matching custom name patterns

    Raises:
        GitHubValidationError: On an invalid timer or reviewer list, or when both
            branch policy flags are set
    """
    if not environment_name:
        raise GitHubValidationError("An environment name is required.")
    if protected_branches_only and custom_branch_policies:
        raise GitHubValidationError(
            "Only one of protected_branches_only and custom_branch_policies can be set.")

    body = {}
    if wait_timer is not None:
        if not 0 <= wait_timer <= MAX_WAIT_TIMER_MINUTES:
            raise GitHubValidationError(
                f"wait_timer must be between 0 and {MAX_WAIT_TIMER_MINUTES} minutes.", wait_timer)
        body["wait_timer"] = wait_timer
    if reviewers is not None:
        body["reviewers"] = _build_reviewers(reviewers)
    if protected_branches_only or custom_branch_policies:
        body["deployment_branch_policy"] = {
            "protected_branches": protected_branches_only,
            "custom_branch_policies": custom_branch_policies,
        }

    owner, repository = resolve_repository_elements(owner_name, repository_name, uri)
    result = invoke_rest_method(RequestDescriptor(
        uri_fragment=f"{_environments_fragment(owner, repository)}/{encode_segment(environment_name)}",
        method=HttpMethod.PUT,
        body=body or None,
        access_token=access_token,
        description=f"Creating environment {environment_name} in {repository}",
        **telemetry_args("new_deployment_environment", OwnerName=owner, RepositoryName=repository),
    ))
    return _decorate(result, owner, repository)


def remove_deployment_environment(environment_name: str, owner_name: Optional[str] = None,
                                  repository_name: Optional[str] = None, uri: Optional[str] = None,
                                  access_token: Optional[str] = None) -> None:
    if not environment_name:
        raise GitHubValidationError("An environment name is required.")
    owner, repository = resolve_repository_elements(owner_name, repository_name, uri)
    invoke_rest_method(RequestDescriptor(
        uri_fragment=f"{_environments_fragment(owner, repository)}/{encode_segment(environment_name)}",
        method=HttpMethod.DELETE,
        access_token=access_token,
        description=f"Removing environment {environment_name} from {repository}",
        **telemetry_args("remove_deployment_environment", OwnerName=owner, RepositoryName=repository),
    ))
