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
import platform
import traceback
from typing import Any, Dict, Optional

import requests

from ghautomation.config import get_config
from ghautomation.utils import debug_log, get_pii_safe_string

TELEMETRY_ENDPOINT = "https://dc.services.visualstudio.com/v2/track"
TELEMETRY_TIMEOUT_SECONDS = 5


class TelemetryHandler:
    """
    Best-effort sink for usage events and exceptions.

    Records are posted as Application Insights envelopes. Property values are
    passed through get_pii_safe_string() before they leave the process, and
    any failure while sending is logged at debug level and dropped: telemetry
    must never change the outcome of the call that produced it.
    """

    def __init__(self, config=None):
        """
        Initialize the telemetry handler.

        Args:
            config: Optional configuration; defaults to get_config()
        """
        self.config = config or get_config()

    @property
    def enabled(self) -> bool:
        return self.config.telemetry_enabled

    def _base_properties(self) -> Dict[str, str]:
        return {
            "ModuleVersion": self.config.VERSION,
            "Platform": platform.system(),
            "PythonVersion": platform.python_version(),
        }

    def scrub_properties(self, properties: Optional[Dict[str, Any]]) -> Dict[str, str]:
        """Hashes every property value unless PII protection is disabled."""
        scrubbed = {}
        for key, value in (properties or {}).items():
            scrubbed[str(key)] = get_pii_safe_string(value, self.config.disable_pii_protection)
        return scrubbed

    def _build_envelope(self, name: str, base_type: str, base_data: Dict[str, Any]) -> Dict[str, Any]:
        ikey = self.config.telemetry_instrumentation_key
        return {
            "name": f"Microsoft.ApplicationInsights.{ikey.replace('-', '')}.{name}",
            "time": datetime.datetime.now(datetime.timezone.utc).isoformat(),
            "iKey": ikey,
            "tags": {"ai.internal.sdkVersion": self.config.USER_AGENT},
            "data": {"baseType": base_type, "baseData": base_data},
        }

    def _post(self, envelope: Dict[str, Any]) -> bool:
        try:
            response = requests.post(
                TELEMETRY_ENDPOINT,
                json=[envelope],
                headers={"User-Agent": self.config.USER_AGENT},
                timeout=TELEMETRY_TIMEOUT_SECONDS,
            )
            response.raise_for_status()
            return True
        except requests.exceptions.RequestException as e:
            debug_log(f"Failed to send telemetry: {e}")
            return False

    def send_event(self, event_name: str, properties: Optional[Dict[str, Any]] = None,
                   metrics: Optional[Dict[str, float]] = None) -> bool:
        """
        Sends a named usage event.

        Args:
            event_name: Name of the event
            properties: Values describing the event; scrubbed before sending
            metrics: Numeric measurements, e.g. Duration in milliseconds

        Returns:
            bool: True if the event was delivered, False otherwise
        """
        if not self.enabled:
            return False

        try:
            all_properties = self._base_properties()
            all_properties.update(self.scrub_properties(properties))
            envelope = self._build_envelope("Event", "EventData", {
                "ver": 2,
                "name": event_name,
                "properties": all_properties,
                "measurements": dict(metrics or {}),
            })
        except Exception as e:
            debug_log(f"Failed to build telemetry event {event_name}: {e}")
            return False

        debug_log(f"Sending telemetry event: {event_name}")
        return self._post(envelope)

    def send_exception(self, exception: BaseException, error_bucket: str,
                       properties: Optional[Dict[str, Any]] = None) -> bool:
        """
        Sends an exception report grouped under error_bucket.

        The exception message is not sent, only its type and stack frames.
        """
        if not self.enabled:
            return False

        try:
            all_properties = self._base_properties()
            all_properties.update(self.scrub_properties(properties))
            all_properties["ErrorBucket"] = error_bucket
            category = getattr(exception, "category", None)
            if category is not None:
                all_properties["ErrorCategory"] = getattr(category, "value", str(category))

            frames = traceback.extract_tb(exception.__traceback__) if exception.__traceback__ else []
            parsed_stack = [
                {"level": level, "method": frame.name, "fileName": frame.filename, "line": frame.lineno}
                for level, frame in enumerate(reversed(frames))
            ]
            envelope = self._build_envelope("Exception", "ExceptionData", {
                "ver": 2,
                "exceptions": [{
                    "typeName": type(exception).__name__,
                    "message": error_bucket,
                    "hasFullStack": bool(parsed_stack),
                    "parsedStack": parsed_stack,
                }],
                "properties": all_properties,
            })
        except Exception as e:
            debug_log(f"Failed to build telemetry exception for {error_bucket}: {e}")
            return False

        debug_log(f"Sending telemetry exception: {error_bucket}")
        return self._post(envelope)


_handler_instance = None


def get_telemetry_handler() -> TelemetryHandler:
    global _handler_instance
    if _handler_instance is None:
        _handler_instance = TelemetryHandler()
    return _handler_instance


def reset_telemetry_handler() -> None:
    global _handler_instance
    _handler_instance = None
