import unittest
import os
import sys
import stat

# Add project root to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
sys.path.insert(0, os.path.dirname(__file__))
from setup_test_env import TestEnvironmentMixin  # noqa: E402

from ghautomation.config import reset_config  # noqa: E402
from ghautomation.core.authentication import (  # noqa: E402
    clear_github_authentication,
    get_access_token,
    get_token_file_path,
    is_github_authentication_configured,
    set_github_authentication,
)


class TestAuthentication(unittest.TestCase, TestEnvironmentMixin):
    """Tests for access token precedence and persistence."""

    def setUp(self):
        self.setup_standard_test_env()

    def tearDown(self):
        self.cleanup_standard_test_env()

    def _without_env_token(self):
        del os.environ["GITHUB_TOKEN"]
        reset_config()

    def test_explicit_token_wins(self):
        set_github_authentication("session-token", session_only=True)
        self.assertEqual(get_access_token("explicit"), "explicit")

    def test_session_token_beats_environment(self):
        self.assertEqual(get_access_token(), "mock-github-token")
        set_github_authentication("session-token", session_only=True)
        self.assertEqual(get_access_token(), "session-token")

    def test_no_token_is_empty(self):
        self._without_env_token()
        self.assertEqual(get_access_token(), "")
        self.assertFalse(is_github_authentication_configured())

    def test_persisted_token(self):
        self._without_env_token()
        set_github_authentication("stored-token")
        path = get_token_file_path()
        self.assertTrue(os.path.exists(path))
        if os.name == "posix":
            self.assertEqual(stat.S_IMODE(os.stat(path).st_mode), 0o600)

        # A fresh process only has the file
        clear_github_authentication(session_only=True)
        self.assertEqual(get_access_token(), "stored-token")
        self.assertTrue(is_github_authentication_configured())

        clear_github_authentication()
        self.assertFalse(os.path.exists(path))
        self.assertEqual(get_access_token(), "")

    @unittest.skipUnless(os.name == "posix", "file modes are only enforced on POSIX")
    def test_existing_token_file_is_restricted(self):
        path = get_token_file_path()
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, "w", encoding="utf-8") as token_file:
            token_file.write("old-token")
        os.chmod(path, 0o644)

        set_github_authentication("new-token")

        self.assertEqual(stat.S_IMODE(os.stat(path).st_mode), 0o600)
        with open(path, encoding="utf-8") as token_file:
            self.assertEqual(token_file.read(), "new-token")

    def test_empty_token_rejected(self):
        with self.assertRaises(ValueError):
            set_github_authentication("")


if __name__ == '__main__':
    unittest.main()
