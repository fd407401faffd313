import unittest
import os
import sys

# Add project root to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
sys.path.insert(0, os.path.dirname(__file__))
from setup_test_env import TestEnvironmentMixin  # noqa: E402

from ghautomation.commands.common import (  # noqa: E402
    add_additional_properties,
    encode_segment,
    get_repository_url,
    resolve_repository_elements,
    split_repository_uri,
    telemetry_args,
)
from ghautomation.config import reset_config  # noqa: E402
from ghautomation.core import GitHubValidationError  # noqa: E402


class TestRepositoryResolution(unittest.TestCase, TestEnvironmentMixin):

    def setUp(self):
        self.setup_standard_test_env()

    def tearDown(self):
        self.cleanup_standard_test_env()

    def test_split_repository_uri(self):
        self.assertEqual(split_repository_uri("https://github.com/octo/hello"), ("octo", "hello"))
        self.assertEqual(split_repository_uri("https://github.com/octo/hello.git"), ("octo", "hello"))
        self.assertEqual(split_repository_uri("https://github.com/octo/hello/issues/3"), ("octo", "hello"))
        self.assertEqual(split_repository_uri("https://api.github.com/repos/octo/hello"), ("octo", "hello"))
        self.assertEqual(split_repository_uri("https://ghe.example.com/api/v3/repos/octo/hello"), ("octo", "hello"))
        self.assertEqual(split_repository_uri("github.com/octo/hello"), ("octo", "hello"))

    def test_split_repository_uri_invalid(self):
        with self.assertRaises(GitHubValidationError):
            split_repository_uri("https://github.com/octo")

    def test_resolution_order(self):
        self.assertEqual(resolve_repository_elements("a", "b"), ("a", "b"))
        self.assertEqual(resolve_repository_elements(uri="https://github.com/c/d"), ("c", "d"))
        self.assertEqual(resolve_repository_elements(), ("mock-owner", "mock-repo"))
        self.assertEqual(resolve_repository_elements(repository_name="other"), ("mock-owner", "other"))

    def test_uri_and_names_conflict(self):
        with self.assertRaises(GitHubValidationError):
            resolve_repository_elements("a", uri="https://github.com/c/d")

    def test_unresolved(self):
        del os.environ["GITHUB_DEFAULT_OWNER_NAME"]
        reset_config()
        with self.assertRaises(GitHubValidationError):
            resolve_repository_elements(repository_name="only-repo")


class TestDecoration(unittest.TestCase, TestEnvironmentMixin):

    def setUp(self):
        self.setup_standard_test_env()

    def tearDown(self):
        self.cleanup_standard_test_env()

    def test_adds_properties_to_each_item(self):
        result = add_additional_properties([{"id": 1}, {"id": 2}, "skip"], {
            "RepositoryUrl": "https://github.com/o/r",
            "LabelId": lambda item: item["id"],
        })
        self.assertEqual(result[0], {"id": 1, "RepositoryUrl": "https://github.com/o/r", "LabelId": 1})
        self.assertEqual(result[1]["LabelId"], 2)
        self.assertEqual(result[2], "skip")

    def test_single_object_and_none(self):
        self.assertEqual(add_additional_properties({"id": 5}, {"X": 1}), {"id": 5, "X": 1})
        self.assertIsNone(add_additional_properties(None, {"X": 1}))

    def test_disabled_pipeline_support(self):
        os.environ["GITHUB_DISABLE_PIPELINE_SUPPORT"] = "true"
        reset_config()
        self.assertEqual(add_additional_properties({"id": 5}, {"X": 1}), {"id": 5})

    def test_repository_url_uses_host(self):
        os.environ["GITHUB_API_HOST_NAME"] = "ghe.example.com"
        reset_config()
        self.assertEqual(get_repository_url("o", "r"), "https://ghe.example.com/o/r")


class TestHelpers(unittest.TestCase):

    def test_encode_segment(self):
        self.assertEqual(encode_segment("good first issue"), "good%20first%20issue")
        self.assertEqual(encode_segment("a/b"), "a%2Fb")
        self.assertEqual(encode_segment(12), "12")

    def test_telemetry_args(self):
        self.assertEqual(telemetry_args("get_label", OwnerName="o", LabelName=None), {
            "telemetry_event_name": "get_label",
            "telemetry_exception_bucket": "get_label",
            "telemetry_properties": {"OwnerName": "o"},
        })


if __name__ == '__main__':
    unittest.main()
