import unittest
import os
import sys
import datetime
from unittest.mock import patch

# Add project root to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
sys.path.insert(0, os.path.dirname(__file__))
from setup_test_env import TestEnvironmentMixin  # noqa: E402

from ghautomation.commands import issues, labels, milestones  # noqa: E402
from ghautomation.core import GitHubValidationError, HttpMethod  # noqa: E402


class TestLabels(unittest.TestCase, TestEnvironmentMixin):
    """Label commands with the core invokers patched out."""

    def setUp(self):
        self.setup_standard_test_env()
        self.single_patcher = patch('ghautomation.commands.labels.invoke_rest_method')
        self.mock_single = self.single_patcher.start()
        self.multi_patcher = patch('ghautomation.commands.labels.invoke_rest_method_multiple_result')
        self.mock_multi = self.multi_patcher.start()

    def tearDown(self):
        self.single_patcher.stop()
        self.multi_patcher.stop()
        self.cleanup_standard_test_env()

    def test_list_labels(self):
        self.mock_multi.return_value = [{"id": 1, "name": "bug"}, {"id": 2, "name": "docs"}]
        result = labels.get_label(owner_name="octo", repository_name="hello")

        descriptor = self.mock_multi.call_args[0][0]
        self.assertEqual(descriptor.uri_fragment, "repos/octo/hello/labels")
        self.assertEqual(descriptor.accept_header, labels.LABEL_ACCEPT_HEADER)
        self.assertEqual(descriptor.telemetry_event_name, "get_label")
        self.assertEqual(result[1]["LabelName"], "docs")
        self.assertEqual(result[0]["RepositoryUrl"], "https://github.com/octo/hello")

    def test_get_label_by_name_is_escaped(self):
        self.mock_single.return_value = {"id": 3, "name": "good first issue"}
        labels.get_label(uri="https://github.com/octo/hello", label="good first issue")
        self.assertEqual(self.mock_single.call_args[0][0].uri_fragment,
                         "repos/octo/hello/labels/good%20first%20issue")

    def test_new_label(self):
        self.mock_single.return_value = {"id": 4, "name": "bug", "color": "d73a4a"}
        labels.new_label("bug", "#D73A4A", "Something is broken")

        descriptor = self.mock_single.call_args[0][0]
        self.assertEqual(descriptor.method, HttpMethod.POST)
        self.assertEqual(descriptor.uri_fragment, "repos/mock-owner/mock-repo/labels")
        self.assertEqual(descriptor.body, {"name": "bug", "color": "d73a4a", "description": "Something is broken"})

    def test_invalid_color(self):
        for color in ("red", "#12345", "gggggg", ""):
            with self.subTest(color=color):
                with self.assertRaises(GitHubValidationError):
                    labels.new_label("bug", color)
        self.mock_single.assert_not_called()

    def test_set_label(self):
        labels.set_label("bug", new_name="defect", color="00ff00")
        descriptor = self.mock_single.call_args[0][0]
        self.assertEqual(descriptor.method, HttpMethod.PATCH)
        self.assertEqual(descriptor.body, {"new_name": "defect", "color": "00ff00"})

    def test_set_label_needs_a_change(self):
        with self.assertRaises(GitHubValidationError):
            labels.set_label("bug")

    def test_remove_label(self):
        self.mock_single.return_value = None
        self.assertIsNone(labels.remove_label("bug"))
        self.assertEqual(self.mock_single.call_args[0][0].method, HttpMethod.DELETE)


class TestIssues(unittest.TestCase, TestEnvironmentMixin):

    def setUp(self):
        self.setup_standard_test_env()
        self.single_patcher = patch('ghautomation.commands.issues.invoke_rest_method')
        self.mock_single = self.single_patcher.start()
        self.multi_patcher = patch('ghautomation.commands.issues.invoke_rest_method_multiple_result')
        self.mock_multi = self.multi_patcher.start()

    def tearDown(self):
        self.single_patcher.stop()
        self.multi_patcher.stop()
        self.cleanup_standard_test_env()

    def test_list_filters_pull_requests(self):
        self.mock_multi.return_value = [
            {"id": 1, "number": 10},
            {"id": 2, "number": 11, "pull_request": {"url": "https://api.github.com/pulls/11"}},
        ]
        result = issues.get_issue(state="all", labels=["bug", "p1"], assignee="octocat")

        self.assertEqual([item["IssueNumber"] for item in result], [10])
        fragment = self.mock_multi.call_args[0][0].uri_fragment
        self.assertEqual(fragment, "repos/mock-owner/mock-repo/issues?state=all&labels=bug%2Cp1&assignee=octocat")

    def test_list_can_include_pull_requests(self):
        self.mock_multi.return_value = [{"id": 2, "number": 11, "pull_request": {}}]
        self.assertEqual(len(issues.get_issue(include_pull_requests=True)), 1)

    def test_invalid_state(self):
        with self.assertRaises(GitHubValidationError):
            issues.get_issue(state="merged")

    def test_get_single_issue(self):
        self.mock_single.return_value = {"id": 1, "number": 10}
        result = issues.get_issue(issue=10)
        self.assertEqual(self.mock_single.call_args[0][0].uri_fragment, "repos/mock-owner/mock-repo/issues/10")
        self.assertEqual(result["IssueId"], 1)

    def test_new_issue(self):
        self.mock_single.return_value = {"id": 1, "number": 12}
        issues.new_issue("Crash on start", body="Steps...", labels=["bug"], milestone=3)
        self.assertEqual(self.mock_single.call_args[0][0].body,
                         {"title": "Crash on start", "body": "Steps...", "labels": ["bug"], "milestone": 3})

    def test_new_issue_requires_title(self):
        with self.assertRaises(GitHubValidationError):
            issues.new_issue("")

    def test_add_issue_label(self):
        self.mock_single.return_value = [{"id": 1, "name": "bug"}]
        result = issues.add_issue_label(10, ["bug"])
        descriptor = self.mock_single.call_args[0][0]
        self.assertEqual(descriptor.uri_fragment, "repos/mock-owner/mock-repo/issues/10/labels")
        self.assertEqual(descriptor.body, {"labels": ["bug"]})
        self.assertEqual(result[0]["IssueNumber"], 10)


class TestMilestones(unittest.TestCase, TestEnvironmentMixin):

    def setUp(self):
        self.setup_standard_test_env()
        self.single_patcher = patch('ghautomation.commands.milestones.invoke_rest_method')
        self.mock_single = self.single_patcher.start()
        self.multi_patcher = patch('ghautomation.commands.milestones.invoke_rest_method_multiple_result')
        self.mock_multi = self.multi_patcher.start()

    def tearDown(self):
        self.single_patcher.stop()
        self.multi_patcher.stop()
        self.cleanup_standard_test_env()

    def test_format_due_on(self):
        self.assertEqual(milestones.format_due_on("2026-03-01"), "2026-03-01T00:00:00Z")
        self.assertEqual(milestones.format_due_on(datetime.date(2026, 3, 1)), "2026-03-01T00:00:00Z")
        self.assertEqual(milestones.format_due_on(datetime.datetime(2026, 3, 1, 17, 30)), "2026-03-01T00:00:00Z")
        with self.assertRaises(GitHubValidationError):
            milestones.format_due_on("next week")

    def test_list(self):
        self.mock_multi.return_value = [{"id": 1, "number": 2}]
        result = milestones.get_milestone(state="closed", sort="completeness")
        self.assertEqual(self.mock_multi.call_args[0][0].uri_fragment,
                         "repos/mock-owner/mock-repo/milestones?state=closed&sort=completeness")
        self.assertEqual(result[0]["MilestoneNumber"], 2)

    def test_invalid_sort(self):
        with self.assertRaises(GitHubValidationError):
            milestones.get_milestone(sort="title")

    def test_new_milestone(self):
        self.mock_single.return_value = {"id": 1, "number": 4}
        milestones.new_milestone("v2.0", description="Next major", due_on="2026-06-30")
        self.assertEqual(self.mock_single.call_args[0][0].body, {
            "title": "v2.0", "state": "open", "description": "Next major", "due_on": "2026-06-30T00:00:00Z"})

    def test_remove_milestone(self):
        milestones.remove_milestone(4)
        descriptor = self.mock_single.call_args[0][0]
        self.assertEqual(descriptor.method, HttpMethod.DELETE)
        self.assertEqual(descriptor.uri_fragment, "repos/mock-owner/mock-repo/milestones/4")


if __name__ == '__main__':
    unittest.main()
