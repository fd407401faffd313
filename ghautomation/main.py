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
Command line entry point: github-automation <resource> <action> [options].

Results are written to stdout as JSON. A GitHubError is logged to stderr
and the process exits with status 1.
"""

import argparse
import json
import sys

from ghautomation.commands import (
    branches,
    deployments,
    events,
    issues,
    labels,
    milestones,
    misc,
    organizations,
    projects,
    repositories,
    teams,
    traffic,
)
from ghautomation.config import get_config
from ghautomation.core import (
    GitHubError,
    clear_github_authentication,
    invoke_graphql,
    is_github_authentication_configured,
    set_github_authentication,
)
from ghautomation.utils import debug_log, log
from ghautomation.version_check import do_version_check


def _repository_kwargs(args) -> dict:
    return {
        "owner_name": args.owner,
        "repository_name": args.repository,
        "uri": args.uri,
        "access_token": args.token,
    }


def _split_list(value):
    if value is None:
        return None
    return [item.strip() for item in value.split(',') if item.strip()]


def _add_repository_options(parser):
    parser.add_argument("--owner", help="Repository owner (defaults to GITHUB_DEFAULT_OWNER_NAME)")
    parser.add_argument("--repository", help="Repository name (defaults to GITHUB_DEFAULT_REPOSITORY_NAME)")
    parser.add_argument("--uri", help="Repository URL, instead of --owner/--repository")


def _run_auth(args):
    if args.action == "set":
        token = args.access_token or sys.stdin.readline().strip()
        set_github_authentication(token, session_only=args.session_only)
        log("Access token stored.")
    elif args.action == "clear":
        clear_github_authentication(session_only=args.session_only)
        log("Access token cleared.")
    else:
        return {"configured": is_github_authentication_configured()}
    return None


def _run_graphql(args):
    variables = json.loads(args.variables) if args.variables else None
    return invoke_graphql(args.query, variables=variables, access_token=args.token,
                          description="Running GraphQL query", telemetry_event_name="graphql")


def _run_label(args):
    repo = _repository_kwargs(args)
    if args.action == "list":
        return labels.get_label(**repo)
    if args.action == "get":
        return labels.get_label(label=args.name, **repo)
    if args.action == "new":
        return labels.new_label(args.name, args.color, args.description, **repo)
    if args.action == "set":
        return labels.set_label(args.name, args.new_name, args.color, args.description, **repo)
    return labels.remove_label(args.name, **repo)


def _run_issue(args):
    repo = _repository_kwargs(args)
    if args.action == "list":
        return issues.get_issue(state=args.state, labels=_split_list(args.labels), assignee=args.assignee,
                                include_pull_requests=args.include_pull_requests, **repo)
    if args.action == "get":
        return issues.get_issue(issue=args.number, **repo)
    if args.action == "new":
        return issues.new_issue(args.title, args.body, _split_list(args.assignees), _split_list(args.labels),
                                args.milestone, **repo)
    return issues.add_issue_label(args.number, _split_list(args.labels), **repo)


def _run_milestone(args):
    repo = _repository_kwargs(args)
    if args.action == "list":
        return milestones.get_milestone(state=args.state, sort=args.sort, **repo)
    if args.action == "new":
        return milestones.new_milestone(args.title, args.state, args.description, args.due_on, **repo)
    return milestones.remove_milestone(args.number, **repo)


def _run_traffic(args):
    repo = _repository_kwargs(args)
    if args.action == "referrers":
        return traffic.get_referrer_traffic(**repo)
    if args.action == "paths":
        return traffic.get_path_traffic(**repo)
    if args.action == "views":
        return traffic.get_view_traffic(per=args.per, **repo)
    return traffic.get_clone_traffic(per=args.per, **repo)


def _run_organization(args):
    if args.action == "get":
        return organizations.get_organization(args.organization, access_token=args.token)
    if args.action == "members":
        return organizations.get_organization_member(args.organization, access_token=args.token)
    return {"member": organizations.is_organization_member(args.organization, args.user, access_token=args.token)}


def _run_team(args):
    if args.action == "members":
        return teams.get_team_member(args.organization, args.slug, access_token=args.token)
    return teams.get_team(args.organization, getattr(args, "slug", None), access_token=args.token)


def _run_environment(args):
    repo = _repository_kwargs(args)
    if args.action == "list":
        return deployments.get_deployment_environment(**repo)
    if args.action == "get":
        return deployments.get_deployment_environment(environment_name=args.name, **repo)
    if args.action == "new":
        reviewers = json.loads(args.reviewers) if args.reviewers else None
        return deployments.new_deployment_environment(
            args.name, wait_timer=args.wait_timer, reviewers=reviewers,
            protected_branches_only=args.protected_branches_only,
            custom_branch_policies=args.custom_branch_policies, **repo)
    return deployments.remove_deployment_environment(args.name, **repo)


def _run_project(args):
    if args.action == "columns":
        return projects.get_project_column(args.project_id, access_token=args.token)
    return projects.move_project_column(args.column_id, first=args.first, last=args.last,
                                        after_column_id=args.after, access_token=args.token)


def _add_action(subparsers, name, help_text, repository_options=True):
    parser = subparsers.add_parser(name, help=help_text)
    if repository_options:
        _add_repository_options(parser)
    return parser


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="github-automation", description="Automate GitHub from the command line.")
    parser.add_argument("--token", help="Access token for this call (overrides the configured token)")
    resources = parser.add_subparsers(dest="resource", required=True)

    auth = resources.add_parser("auth", help="Manage the stored access token")
    auth_actions = auth.add_subparsers(dest="action", required=True)
    auth_set = auth_actions.add_parser("set", help="Store an access token (read from stdin if omitted)")
    auth_set.add_argument("access_token", nargs="?")
    auth_set.add_argument("--session-only", action="store_true")
    auth_clear = auth_actions.add_parser("clear", help="Remove the stored access token")
    auth_clear.add_argument("--session-only", action="store_true")
    auth_actions.add_parser("status", help="Report whether an access token is configured")
    auth.set_defaults(handler=_run_auth)

    graphql = resources.add_parser("graphql", help="Run a GraphQL query")
    graphql.add_argument("query")
    graphql.add_argument("--variables", help="Variables as a JSON object")
    graphql.set_defaults(handler=_run_graphql)

    repo = resources.add_parser("repo", help="Repositories")
    repo_actions = repo.add_subparsers(dest="action", required=True)
    _add_action(repo_actions, "get", "Get a repository")
    repo.set_defaults(handler=lambda args: repositories.get_repository(**_repository_kwargs(args)))

    label = resources.add_parser("label", help="Repository labels")
    label_actions = label.add_subparsers(dest="action", required=True)
    _add_action(label_actions, "list", "List labels")
    _add_action(label_actions, "get", "Get a label").add_argument("name")
    label_new = _add_action(label_actions, "new", "Create a label")
    label_new.add_argument("name")
    label_new.add_argument("--color", required=True)
    label_new.add_argument("--description")
    label_set = _add_action(label_actions, "set", "Update a label")
    label_set.add_argument("name")
    label_set.add_argument("--new-name")
    label_set.add_argument("--color")
    label_set.add_argument("--description")
    _add_action(label_actions, "remove", "Delete a label").add_argument("name")
    label.set_defaults(handler=_run_label)

    issue = resources.add_parser("issue", help="Issues")
    issue_actions = issue.add_subparsers(dest="action", required=True)
    issue_list = _add_action(issue_actions, "list", "List issues")
    issue_list.add_argument("--state", default="open", choices=issues.VALID_STATES)
    issue_list.add_argument("--labels", help="Comma separated label names")
    issue_list.add_argument("--assignee")
    issue_list.add_argument("--include-pull-requests", action="store_true")
    _add_action(issue_actions, "get", "Get an issue").add_argument("number", type=int)
    issue_new = _add_action(issue_actions, "new", "Create an issue")
    issue_new.add_argument("title")
    issue_new.add_argument("--body")
    issue_new.add_argument("--assignees", help="Comma separated logins")
    issue_new.add_argument("--labels", help="Comma separated label names")
    issue_new.add_argument("--milestone", type=int)
    issue_label = _add_action(issue_actions, "add-label", "Add labels to an issue")
    issue_label.add_argument("number", type=int)
    issue_label.add_argument("labels", help="Comma separated label names")
    issue.set_defaults(handler=_run_issue)

    milestone = resources.add_parser("milestone", help="Milestones")
    milestone_actions = milestone.add_subparsers(dest="action", required=True)
    milestone_list = _add_action(milestone_actions, "list", "List milestones")
    milestone_list.add_argument("--state", default="open", choices=milestones.VALID_STATES)
    milestone_list.add_argument("--sort", default="due_on", choices=milestones.VALID_SORTS)
    milestone_new = _add_action(milestone_actions, "new", "Create a milestone")
    milestone_new.add_argument("title")
    milestone_new.add_argument("--state", default="open", choices=("open", "closed"))
    milestone_new.add_argument("--description")
    milestone_new.add_argument("--due-on", help="Due date as YYYY-MM-DD")
    _add_action(milestone_actions, "remove", "Delete a milestone").add_argument("number", type=int)
    milestone.set_defaults(handler=_run_milestone)

    branch = resources.add_parser("branch", help="Branches")
    branch_actions = branch.add_subparsers(dest="action", required=True)
    branch_list = _add_action(branch_actions, "list", "List branches")
    branch_list.add_argument("--protected", action="store_true")
    _add_action(branch_actions, "get", "Get a branch").add_argument("name")
    branch.set_defaults(handler=lambda args: branches.get_branch(
        branch=getattr(args, "name", None), protected_only=getattr(args, "protected", False),
        **_repository_kwargs(args)))

    traffic_parser = resources.add_parser("traffic", help="Repository traffic")
    traffic_actions = traffic_parser.add_subparsers(dest="action", required=True)
    _add_action(traffic_actions, "referrers", "Top referrers")
    _add_action(traffic_actions, "paths", "Top content paths")
    for name in ("views", "clones"):
        _add_action(traffic_actions, name, f"Repository {name}").add_argument(
            "--per", default="day", choices=traffic.VALID_PERIODS)
    traffic_parser.set_defaults(handler=_run_traffic)

    org = resources.add_parser("org", help="Organizations")
    org_actions = org.add_subparsers(dest="action", required=True)
    _add_action(org_actions, "get", "Get an organization", False).add_argument("organization")
    _add_action(org_actions, "members", "List organization members", False).add_argument("organization")
    org_member = _add_action(org_actions, "is-member", "Check organization membership", False)
    org_member.add_argument("organization")
    org_member.add_argument("user")
    org.set_defaults(handler=_run_organization)

    team = resources.add_parser("team", help="Teams")
    team_actions = team.add_subparsers(dest="action", required=True)
    _add_action(team_actions, "list", "List teams", False).add_argument("organization")
    for name, help_text in (("get", "Get a team"), ("members", "List team members")):
        team_parser = _add_action(team_actions, name, help_text, False)
        team_parser.add_argument("organization")
        team_parser.add_argument("slug")
    team.set_defaults(handler=_run_team)

    environment = resources.add_parser("environment", help="Deployment environments")
    environment_actions = environment.add_subparsers(dest="action", required=True)
    _add_action(environment_actions, "list", "List environments")
    _add_action(environment_actions, "get", "Get an environment").add_argument("name")
    environment_new = _add_action(environment_actions, "new", "Create or update an environment")
    environment_new.add_argument("name")
    environment_new.add_argument("--wait-timer", type=int)
    environment_new.add_argument("--reviewers", help='JSON list, e.g. [{"type": "User", "id": 1}]')
    environment_new.add_argument("--protected-branches-only", action="store_true")
    environment_new.add_argument("--custom-branch-policies", action="store_true")
    _add_action(environment_actions, "remove", "Delete an environment").add_argument("name")
    environment.set_defaults(handler=_run_environment)

    project = resources.add_parser("project", help="Classic project boards")
    project_actions = project.add_subparsers(dest="action", required=True)
    _add_action(project_actions, "columns", "List project columns", False).add_argument("project_id", type=int)
    move = _add_action(project_actions, "move-column", "Move a project column", False)
    move.add_argument("column_id", type=int)
    move.add_argument("--first", action="store_true")
    move.add_argument("--last", action="store_true")
    move.add_argument("--after", type=int, help="Place after this column id")
    project.set_defaults(handler=_run_project)

    event = resources.add_parser("event", help="Issue events")
    event_actions = event.add_subparsers(dest="action", required=True)
    _add_action(event_actions, "list", "List issue events").add_argument("--issue", type=int)
    event.set_defaults(handler=lambda args: events.get_event(issue=args.issue, **_repository_kwargs(args)))

    resources.add_parser("rate-limit", help="Show rate limit status").set_defaults(
        handler=lambda args: misc.get_rate_limit(access_token=args.token))
    user = resources.add_parser("user", help="Get a user (the current user if omitted)")
    user.add_argument("name", nargs="?")
    user.set_defaults(handler=lambda args: misc.get_user(args.name, access_token=args.token))
    resources.add_parser("viewer", help="Login of the current user via GraphQL").set_defaults(
        handler=lambda args: {"login": misc.get_viewer_login(access_token=args.token)})

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    get_config()
    do_version_check()

    try:
        result = args.handler(args)
    except GitHubError as e:
        log(str(e), is_error=True)
        debug_log(f"Error category: {e.category.value}")
        return 1
    except ValueError as e:
        log(f"Error: {e}", is_error=True)
        return 1

    if result is not None:
        print(json.dumps(result, indent=2, default=str))
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
