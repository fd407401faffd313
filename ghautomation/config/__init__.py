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
Configuration access for GitHub Automation.

get_config() returns a cached GitHubConfig built from the environment;
reset_config() drops the cache so the next call re-reads it (used by tests
and after environment changes).
"""

from ghautomation.config.github_config import GitHubConfig, PUBLIC_HOST_NAME
from ghautomation.utils import configure_logging

_config_instance = None


def get_config(env_vars=None) -> GitHubConfig:
    """Returns the process-wide configuration, creating it on first use."""
    global _config_instance
    if _config_instance is None:
        _config_instance = GitHubConfig(env_vars=env_vars)
        configure_logging(
            debug_mode=_config_instance.debug_mode,
            log_path=_config_instance.log_path,
            log_time_as_utc=_config_instance.log_time_as_utc,
            log_process_id=_config_instance.log_process_id,
            disable_logging=_config_instance.disable_logging,
        )
    return _config_instance


def reset_config() -> None:
    """Clears the cached configuration."""
    global _config_instance
    _config_instance = None


__all__ = ["GitHubConfig", "PUBLIC_HOST_NAME", "get_config", "reset_config"]
