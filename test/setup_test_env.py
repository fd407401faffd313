"""Standard test environment setup helper.

This module provides consistent test environment setup across all test files
so that no test depends on the developer's own GitHub token, stored
credentials or log settings.
"""

import os
import shutil
import tempfile
from pathlib import Path
from unittest.mock import patch


def get_standard_test_env_vars(config_dir=None):
    """
    Get standard environment variables for testing.

    Args:
        config_dir: Directory used as the per-user configuration directory

    Returns:
        dict: Dictionary of environment variables needed for testing
    """
    config_dir = config_dir or tempfile.gettempdir()
    return {
        # GitHub configuration
        'GITHUB_TOKEN': 'mock-github-token',
        'GITHUB_API_HOST_NAME': 'github.com',
        'GITHUB_DEFAULT_OWNER_NAME': 'mock-owner',
        'GITHUB_DEFAULT_REPOSITORY_NAME': 'mock-repo',

        # Keep tests away from the network and the real user profile
        'GITHUB_DISABLE_TELEMETRY': 'true',
        'GITHUB_DISABLE_UPDATE_CHECK': 'true',
        'GITHUB_SUPPRESS_NO_TOKEN_WARNING': 'true',
        'HOME': config_dir,
        'XDG_CONFIG_HOME': config_dir,
        'APPDATA': config_dir,

        # Debug and testing flags
        'DEBUG_MODE': 'false',
        'TESTING': 'true'
    }


def setup_test_environment(config_dir=None, **overrides):
    """
    Set up standard test environment with all required variables.

    Returns:
        unittest.mock._patch: Environment patch that should be started/stopped by caller
    """
    env_vars = get_standard_test_env_vars(config_dir)
    env_vars.update(overrides)
    return patch.dict(os.environ, env_vars, clear=True)


def reset_module_state():
    """Clears every process-wide cache the package keeps between calls."""
    from ghautomation.config import reset_config
    from ghautomation.core import authentication, invoker
    from ghautomation.telemetry import reset_telemetry_handler
    from ghautomation.utils import configure_logging

    reset_config()
    reset_telemetry_handler()
    configure_logging()
    authentication._session_token = None
    invoker._no_token_warning_shown = False


class TestEnvironmentMixin:
    """
    Mixin class to provide standard test environment setup.

    Usage:
        class TestMyClass(unittest.TestCase, TestEnvironmentMixin):
            def setUp(self):
                self.setup_standard_test_env()

            def tearDown(self):
                self.cleanup_standard_test_env()
    """

    def setup_standard_test_env(self, **overrides):
        """Set up standard test environment, with optional variable overrides."""
        self._config_dir = create_temp_dir()
        self._env_patcher = setup_test_environment(str(self._config_dir), **overrides)
        self._env_patcher.start()
        reset_module_state()

    def cleanup_standard_test_env(self):
        """Clean up standard test environment."""
        if hasattr(self, '_env_patcher'):
            self._env_patcher.stop()
        reset_module_state()
        cleanup_temp_dir(getattr(self, '_config_dir', None))


def create_temp_dir():
    """
    Create a temporary directory for configuration and log files.

    Returns:
        pathlib.Path: Path to temporary directory
    """
    return Path(tempfile.mkdtemp())


def cleanup_temp_dir(temp_dir):
    """
    Clean up temporary directory.

    Args:
        temp_dir: Path to temporary directory to clean up
    """
    if temp_dir and temp_dir.exists():
        shutil.rmtree(temp_dir, ignore_errors=True)
