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

import os
from typing import Optional, Any
from ghautomation.utils import debug_log, log

PUBLIC_HOST_NAME = "github.com"


class GitHubConfig:
    """
    Configuration for GitHub Automation.
    Handles loading, validating, and accessing configuration values.

    Every setting is read from an environment variable so that the same
    configuration applies to the CLI and to library callers. Invalid values
    are logged and replaced with their defaults rather than failing the run.
    """

    # Preset values
    VERSION = "v1.2.0"
    USER_AGENT = f"github-automation {VERSION}"
    DEFAULT_ACCEPT_HEADER = "application/vnd.github.v3+json"

    def __init__(self, env_vars=None):
        """
        Initialize the configuration manager.

        Args:
            env_vars: Optional dictionary of environment variables (for testing)
        """
        self.env_vars = env_vars if env_vars is not None else os.environ
        self._load_config()

    def _get_env_var(self, var_name: str, required: bool = False, default: Optional[Any] = None) -> Optional[str]:
        """Gets an environment variable, returning the default when it is unset or empty."""
        value = self.env_vars.get(var_name)
        if required and not value:
            log(f"Error: Required environment variable {var_name} is not set.", is_error=True)
        return value if value else default

    def _get_bool(self, var_name: str, default: bool = False) -> bool:
        value = self._get_env_var(var_name, default="true" if default else "false")
        return str(value).strip().lower() in ("true", "1", "yes")

    def _load_config(self):
        """Loads all configuration from environment variables."""

        # --- Core Settings ---
        self.debug_mode = self._get_bool("DEBUG_MODE")

        # --- API Settings ---
        self.api_host_name = self._get_api_host_name()
        self.web_request_timeout_sec = self._get_web_request_timeout_sec()
        self.access_token = self._get_env_var("GITHUB_TOKEN", default="")
        self.suppress_no_token_warning = self._get_bool("GITHUB_SUPPRESS_NO_TOKEN_WARNING")

        # --- Default repository context ---
        self.default_owner_name = self._get_env_var("GITHUB_DEFAULT_OWNER_NAME")
        self.default_repository_name = self._get_env_var("GITHUB_DEFAULT_REPOSITORY_NAME")

        # --- Result decoration ---
        self.disable_pipeline_support = self._get_bool("GITHUB_DISABLE_PIPELINE_SUPPORT")

        # --- Logging Configuration ---
        self.disable_logging = self._get_bool("GITHUB_DISABLE_LOGGING")
        self.log_path = self._get_env_var("GITHUB_LOG_PATH")
        self.log_request_body = self._get_bool("GITHUB_LOG_REQUEST_BODY")
        self.log_time_as_utc = self._get_bool("GITHUB_LOG_TIME_AS_UTC")
        self.log_process_id = self._get_bool("GITHUB_LOG_PROCESS_ID")

        # --- Telemetry Configuration ---
        self.disable_telemetry = self._get_bool("GITHUB_DISABLE_TELEMETRY")
        self.telemetry_instrumentation_key = self._get_env_var("GITHUB_TELEMETRY_INSTRUMENTATION_KEY")
        self.disable_pii_protection = self._get_bool("GITHUB_DISABLE_PII_PROTECTION")

        # --- Update check ---
        self.disable_update_check = self._get_bool("GITHUB_DISABLE_UPDATE_CHECK")

        debug_log(f"API Host Name: {self.api_host_name}")
        debug_log(f"Web Request Timeout (sec): {self.web_request_timeout_sec}")
        debug_log(f"Access Token configured: {bool(self.access_token)}")
        debug_log(f"Disable Pipeline Support: {self.disable_pipeline_support}")
        debug_log(f"Log Request Body: {self.log_request_body}")
        debug_log(f"Telemetry enabled: {self.telemetry_enabled}")

    def _get_api_host_name(self) -> str:
        """Normalizes the configured API host name, stripping any scheme or trailing slash."""
        host = self._get_env_var("GITHUB_API_HOST_NAME", default=PUBLIC_HOST_NAME)
        host = host.strip().replace('https://', '').replace('http://', '').rstrip('/')
        if not host:
            log(f"GITHUB_API_HOST_NAME was empty, using default: {PUBLIC_HOST_NAME}", is_warning=True)
            return PUBLIC_HOST_NAME
        return host

    def _get_web_request_timeout_sec(self) -> int:
        """Validates the request timeout. 0 means no timeout."""
        default_timeout = 0
        try:
            timeout = int(self._get_env_var("GITHUB_WEB_REQUEST_TIMEOUT_SEC", default="0"))
            if timeout < 0:
                log(f"GITHUB_WEB_REQUEST_TIMEOUT_SEC was negative, using default: {default_timeout}", is_warning=True)
                return default_timeout
            return timeout
        except (ValueError, TypeError):
            log(f"Invalid GITHUB_WEB_REQUEST_TIMEOUT_SEC value. Using default: {default_timeout}", is_warning=True)
            return default_timeout

    @property
    def is_enterprise(self) -> bool:
        return self.api_host_name.lower() != PUBLIC_HOST_NAME

    @property
    def telemetry_enabled(self) -> bool:
        return not self.disable_telemetry and bool(self.telemetry_instrumentation_key)

    @property
    def request_timeout(self) -> Optional[int]:
        """Timeout in the form requests expects (None disables the timeout)."""
        return self.web_request_timeout_sec or None
