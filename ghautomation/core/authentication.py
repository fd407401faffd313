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
Access token resolution.

Precedence: the token passed to the call, then the process-wide configured
token (session token, GITHUB_TOKEN, persisted token file), then none. An
empty result means the call is made anonymously.
"""

import os
from typing import Optional

from ghautomation.config import get_config
from ghautomation.utils import debug_log, get_user_config_dir, log

TOKEN_FILE_NAME = "access_token"

_session_token: Optional[str] = None


def get_token_file_path() -> str:
    return os.path.join(get_user_config_dir(), TOKEN_FILE_NAME)


def _read_token_file() -> str:
    path = get_token_file_path()
    if not os.path.exists(path):
        return ""
    try:
        with open(path, "r", encoding="utf-8") as token_file:
            return token_file.read().strip()
    except OSError as e:
        debug_log(f"Unable to read stored access token from {path}: {e}")
        return ""


def get_configured_token(config=None) -> str:
    """Returns the process-wide default token, or an empty string."""
    if _session_token:
        return _session_token

    config = config or get_config()
    if config.access_token:
        return config.access_token

    return _read_token_file()


def get_access_token(access_token: Optional[str] = None, config=None) -> str:
    """
    Returns the effective token for a call. Never raises.

    Args:
        access_token: Token supplied explicitly for this call
        config: Optional configuration; defaults to get_config()

    Returns:
        str: The token to send, or "" for an unauthenticated call
    """
    if access_token:
        return access_token
    return get_configured_token(config)


def set_github_authentication(access_token: str, session_only: bool = False) -> None:
    """
    Sets the default token used by all subsequent calls in this process.

    Unless session_only is True, the token is also written to the user
    configuration directory (owner read/write only) so later runs pick it up.
    """
    global _session_token
    if not access_token:
        raise ValueError("An access token is required.")

    _session_token = access_token
    if session_only:
        debug_log("Access token cached for this session only.")
        return

    path = get_token_file_path()
    os.makedirs(os.path.dirname(path), exist_ok=True)
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    # The mode above only applies when the file is created.
    if hasattr(os, "fchmod"):
        os.fchmod(fd, 0o600)
    with os.fdopen(fd, "w", encoding="utf-8") as token_file:
        token_file.write(access_token)
    log(f"Access token stored at {path}.")


def clear_github_authentication(session_only: bool = False) -> None:
    """Removes the cached token and, unless session_only, the persisted one."""
    global _session_token
    _session_token = None
    if session_only:
        return

    path = get_token_file_path()
    if os.path.exists(path):
        os.remove(path)
        log(f"Removed stored access token at {path}.")


def is_github_authentication_configured(config=None) -> bool:
    """Returns True when a default token is available."""
    return bool(get_configured_token(config))
