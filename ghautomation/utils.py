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

import datetime
import hashlib
import os
import platform
import sys
from typing import Optional

# Unicode to ASCII fallback mappings for Windows
UNICODE_FALLBACKS = {
    '❌': 'X',  # ❌ -> X
    '✅': '',  # ✅ -> ''
    '✨': '*',  # ✨ -> *
    '⚠️': '!',  # ⚠️ -> !
}

# Populated by configure_logging() once the configuration has been loaded.
_log_settings = {
    "debug_mode": False,
    "log_path": None,
    "log_time_as_utc": False,
    "log_process_id": False,
    "disable_logging": False,
}


def configure_logging(debug_mode: bool = False,
                      log_path: Optional[str] = None,
                      log_time_as_utc: bool = False,
                      log_process_id: bool = False,
                      disable_logging: bool = False) -> None:
    """Applies logging settings from the configuration."""
    _log_settings["debug_mode"] = debug_mode
    _log_settings["log_path"] = log_path
    _log_settings["log_time_as_utc"] = log_time_as_utc
    _log_settings["log_process_id"] = log_process_id
    _log_settings["disable_logging"] = disable_logging


def safe_print(message, file=None, flush=True):
    """Safely print message, handling encoding issues on Windows."""
    try:
        print(message, file=file, flush=flush)
    except UnicodeEncodeError:
        # On Windows, replace Unicode chars with ASCII equivalents
        for unicode_char, ascii_fallback in UNICODE_FALLBACKS.items():
            message = message.replace(unicode_char, ascii_fallback)

        # Replace any remaining problematic Unicode characters with '?'
        if platform.system() == 'Windows':
            message = ''.join([c if ord(c) < 128 else '?' for c in message])

        print(message, file=file, flush=flush)


def _write_log_file(level: str, message: str) -> None:
    """Appends a formatted line to the configured log file, if any."""
    log_path = _log_settings["log_path"]
    if not log_path or _log_settings["disable_logging"]:
        return

    if _log_settings["log_time_as_utc"]:
        timestamp = datetime.datetime.now(datetime.timezone.utc).strftime("%Y-%m-%d %H:%M:%SZ")
    else:
        timestamp = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")

    prefix = f"{timestamp} : {level}"
    if _log_settings["log_process_id"]:
        prefix = f"{prefix} : {os.getpid()}"

    try:
        with open(log_path, "a", encoding="utf-8") as log_file:
            log_file.write(f"{prefix} : {message}\n")
    except OSError as e:
        # The log file is a side channel; the console output already happened.
        safe_print(f"WARNING: Unable to write to log file {log_path}: {e}", file=sys.stderr)


def log(message: str, is_error: bool = False, is_warning: bool = False):
    """Prints to stdout/stderr and appends to the log file when configured."""
    if is_error:
        safe_print(message, file=sys.stderr, flush=True)
        _write_log_file("ERROR", message)
    elif is_warning:
        safe_print(f"WARNING: {message}", flush=True)
        _write_log_file("WARNING", message)
    else:
        safe_print(message, flush=True)
        _write_log_file("INFO", message)


def debug_log(*args, **kwargs):
    """Prints only if DEBUG_MODE is True. Always written to the log file."""
    message = " ".join(map(str, args))
    _write_log_file("DEBUG", message)
    if _log_settings["debug_mode"]:
        safe_print(message, flush=True)


def get_pii_safe_string(value, disable_pii_protection: bool = False) -> str:
    """
    Returns a SHA256 hash of the value so it can be reported without exposing
    user data. Returns the plain value when PII protection is disabled.
    """
    if value is None:
        return ""
    text = str(value)
    if disable_pii_protection:
        return text
    return hashlib.sha256(text.encode("utf-8")).hexdigest().upper()


def get_user_config_dir() -> str:
    """Per-user configuration directory, following platform conventions."""
    if sys.platform.startswith("win"):
        base = os.environ.get("APPDATA", os.path.expanduser("~"))
        return os.path.join(base, "github-automation")
    if sys.platform == "darwin":
        return os.path.join(os.path.expanduser("~"), "Library", "Application Support", "github-automation")

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return os.path.join(xdg, "github-automation")
    return os.path.join(os.path.expanduser("~"), ".config", "github-automation")
