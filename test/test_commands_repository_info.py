import unittest
import os
import sys
from unittest.mock import patch

# Add project root to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
sys.path.insert(0, os.path.dirname(__file__))
from setup_test_env import TestEnvironmentMixin  # noqa: E402

from ghautomation.commands import branches, deployments, events, misc, repositories, traffic  # noqa: E402
from ghautomation.core import GitHubValidationError, HttpMethod  # noqa: E402


class TestBranchesAndRepositories(unittest.TestCase, TestEnvironmentMixin):

    def setUp(self):
        self.setup_standard_test_env()

    def tearDown(self):
        self.cleanup_standard_test_env()

    @patch('ghautomation.commands.branches.invoke_rest_method_multiple_result')
    def test_protected_branches(self, mock_multi):
        mock_multi.return_value = [{"name": "main", "commit": {"sha": "abc"}}]
        result = branches.get_branch(protected_only=True)
        self.assertEqual(mock_multi.call_args[0][0].uri_fragment,
                         "repos/mock-owner/mock-repo/branches?protected=true")
        self.assertEqual(result[0]["BranchName"], "main")
        self.assertEqual(result[0]["Sha"], "abc")

    @patch('ghautomation.commands.branches.invoke_rest_method')
    def test_single_branch(self, mock_single):
        mock_single.return_value = {"name": "feature/x", "commit": {"sha": "def"}}
        branches.get_branch(branch="feature/x")
        self.assertEqual(mock_single.call_args[0][0].uri_fragment,
                         "repos/mock-owner/mock-repo/branches/feature%2Fx")

    @patch('ghautomation.commands.repositories.invoke_rest_method')
    def test_get_repository(self, mock_single):
        mock_single.return_value = {"id": 1, "full_name": "octo/hello"}
        result = repositories.get_repository(uri="https://github.com/octo/hello.git")
        self.assertEqual(mock_single.call_args[0][0].uri_fragment, "repos/octo/hello")
        self.assertEqual(result["RepositoryUrl"], "https://github.com/octo/hello")


class TestTraffic(unittest.TestCase, TestEnvironmentMixin):

    def setUp(self):
        self.setup_standard_test_env()
        self.single_patcher = patch('ghautomation.commands.traffic.invoke_rest_method')
        self.mock_single = self.single_patcher.start()
        self.mock_single.return_value = {"count": 10, "uniques": 3, "views": []}

    def tearDown(self):
        self.single_patcher.stop()
        self.cleanup_standard_test_env()

    def test_endpoints(self):
        traffic.get_referrer_traffic()
        self.assertEqual(self.mock_single.call_args[0][0].uri_fragment,
                         "repos/mock-owner/mock-repo/traffic/popular/referrers")
        traffic.get_path_traffic()
        self.assertEqual(self.mock_single.call_args[0][0].uri_fragment,
                         "repos/mock-owner/mock-repo/traffic/popular/paths")
        traffic.get_view_traffic(per="week")
        self.assertEqual(self.mock_single.call_args[0][0].uri_fragment,
                         "repos/mock-owner/mock-repo/traffic/views?per=week")
        traffic.get_clone_traffic()
        self.assertEqual(self.mock_single.call_args[0][0].uri_fragment,
                         "repos/mock-owner/mock-repo/traffic/clones?per=day")

    def test_invalid_period(self):
        with self.assertRaises(GitHubValidationError):
            traffic.get_view_traffic(per="month")


class TestDeployments(unittest.TestCase, TestEnvironmentMixin):

    def setUp(self):
        self.setup_standard_test_env()
        self.single_patcher = patch('ghautomation.commands.deployments.invoke_rest_method')
        self.mock_single = self.single_patcher.start()

    def tearDown(self):
        self.single_patcher.stop()
        self.cleanup_standard_test_env()

    @patch('ghautomation.commands.deployments.invoke_rest_method_multiple_result')
    def test_list_pages_through_wrapped_environments(self, mock_multi):
        mock_multi.return_value = [{"name": "staging"}, {"name": "prod"}]
        result = deployments.get_deployment_environment()

        self.assertEqual(mock_multi.call_args[0][0].uri_fragment, "repos/mock-owner/mock-repo/environments")
        self.assertEqual(mock_multi.call_args[1]["items_key"], "environments")
        self.assertEqual([item["EnvironmentName"] for item in result], ["staging", "prod"])
        self.mock_single.assert_not_called()

    def test_new_environment(self):
        self.mock_single.return_value = {"name": "prod"}
        deployments.new_deployment_environment(
            "prod", wait_timer=30, reviewers=[{"type": "Team", "id": 5}], protected_branches_only=True)

        descriptor = self.mock_single.call_args[0][0]
        self.assertEqual(descriptor.method, HttpMethod.PUT)
        self.assertEqual(descriptor.uri_fragment, "repos/mock-owner/mock-repo/environments/prod")
        self.assertEqual(descriptor.body, {
            "wait_timer": 30,
            "reviewers": [{"type": "Team", "id": 5}],
            "deployment_branch_policy": {"protected_branches": True, "custom_branch_policies": False},
        })

    def test_new_environment_without_settings_has_no_body(self):
        deployments.new_deployment_environment("dev")
        self.assertIsNone(self.mock_single.call_args[0][0].body)

    def test_new_environment_validation(self):
        invalid = [
            {"wait_timer": -1},
            {"wait_timer": 50000},
            {"reviewers": [{"type": "Robot", "id": 1}]},
            {"reviewers": [{"type": "User", "id": i} for i in range(7)]},
            {"protected_branches_only": True, "custom_branch_policies": True},
        ]
        for kwargs in invalid:
            with self.subTest(kwargs=kwargs):
                with self.assertRaises(GitHubValidationError):
                    deployments.new_deployment_environment("prod", **kwargs)
        self.mock_single.assert_not_called()

    def test_remove_environment(self):
        deployments.remove_deployment_environment("dev")
        self.assertEqual(self.mock_single.call_args[0][0].method, HttpMethod.DELETE)


class TestEventsAndMisc(unittest.TestCase, TestEnvironmentMixin):

    def setUp(self):
        self.setup_standard_test_env()

    def tearDown(self):
        self.cleanup_standard_test_env()

    @patch('ghautomation.commands.events.invoke_rest_method_multiple_result')
    def test_events_use_all_previews(self, mock_multi):
        mock_multi.return_value = [{"id": 99, "event": "labeled"}]
        result = events.get_event(issue=5)
        descriptor = mock_multi.call_args[0][0]
        self.assertEqual(descriptor.uri_fragment, "repos/mock-owner/mock-repo/issues/5/events")
        self.assertEqual(descriptor.accept_header.split(","), list(events.EVENT_PREVIEW_MEDIA_TYPES))
        self.assertEqual(result[0]["EventId"], 99)

    @patch('ghautomation.commands.misc.invoke_rest_method')
    def test_rate_limit_and_user(self, mock_single):
        mock_single.return_value = {"resources": {}}
        misc.get_rate_limit()
        self.assertEqual(mock_single.call_args[0][0].uri_fragment, "rate_limit")

        mock_single.return_value = {"login": "octocat"}
        self.assertEqual(misc.get_user()["UserName"], "octocat")
        self.assertEqual(mock_single.call_args[0][0].uri_fragment, "user")
        misc.get_user("hubot")
        self.assertEqual(mock_single.call_args[0][0].uri_fragment, "users/hubot")

    @patch('ghautomation.commands.misc.invoke_graphql')
    def test_viewer_login(self, mock_graphql):
        mock_graphql.return_value = {"viewer": {"login": "octocat"}}
        self.assertEqual(misc.get_viewer_login(), "octocat")
        self.assertEqual(mock_graphql.call_args[0][0], misc.VIEWER_LOGIN_QUERY)


if __name__ == '__main__':
    unittest.main()
