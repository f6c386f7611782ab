"""Client configuration for pympk."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pympk._constants import (
    DEFAULT_POLL_INTERVAL,
    FEED_URL,
    FOCUS_RADIUS_M,
    NO_DATA_MESSAGE,
    REGION_PADDING,
    SINGLE_VEHICLE_SPAN,
)
from pympk.exceptions import MpkConfigError


def _env_float(value: str, name: str) -> float:
    try:
        return float(value)
    except ValueError as exc:
        raise MpkConfigError(f"{name} must be a number, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class MpkConfig:
    """Client configuration.

    Parameters
    ----------
    feed_url : str
        Vehicle position endpoint. Defaults to the MPK Łódź feed.
    poll_interval : float
        Seconds between poll cycles while a poller is active.
    request_timeout : float or None
        Total timeout for one feed request in seconds. ``None`` keeps the
        aiohttp default.
    no_data_message : str
        Message shown in place of the map when a cycle fails.
    single_vehicle_span : float
        Viewport span in degrees when a single vehicle is shown.
    region_padding : float
        Multiplier applied to the vehicles' bounding box.
    focus_radius_m : float
        Size in metres of the region shown after a pin is selected.
    """

    feed_url: str = FEED_URL
    poll_interval: float = DEFAULT_POLL_INTERVAL
    request_timeout: float | None = None
    no_data_message: str = NO_DATA_MESSAGE
    single_vehicle_span: float = SINGLE_VEHICLE_SPAN
    region_padding: float = REGION_PADDING
    focus_radius_m: float = FOCUS_RADIUS_M

    def __post_init__(self) -> None:
        if not self.feed_url:
            raise MpkConfigError("feed_url must be non-empty")
        if self.poll_interval <= 0:
            raise MpkConfigError(f"poll_interval must be positive, got {self.poll_interval}")
        if self.request_timeout is not None and self.request_timeout <= 0:
            raise MpkConfigError(f"request_timeout must be positive, got {self.request_timeout}")
        if self.single_vehicle_span <= 0:
            raise MpkConfigError(f"single_vehicle_span must be positive, got {self.single_vehicle_span}")
        if self.region_padding < 1:
            raise MpkConfigError(f"region_padding must be at least 1, got {self.region_padding}")
        if self.focus_radius_m <= 0:
            raise MpkConfigError(f"focus_radius_m must be positive, got {self.focus_radius_m}")

    @classmethod
    def from_env(cls, **overrides: Any) -> MpkConfig:
        """Create configuration from environment variables.

        Reads ``MPK_FEED_URL``, ``MPK_POLL_INTERVAL``, ``MPK_REQUEST_TIMEOUT``
        and ``MPK_NO_DATA_MESSAGE``. Explicit keyword arguments override
        environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        MpkConfig
            Populated configuration.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        feed_url = env.get("MPK_FEED_URL")
        if feed_url is not None:
            config_kwargs["feed_url"] = feed_url

        no_data = env.get("MPK_NO_DATA_MESSAGE")
        if no_data is not None:
            config_kwargs["no_data_message"] = no_data

        interval_env = env.get("MPK_POLL_INTERVAL")
        if interval_env is not None and "poll_interval" not in overrides:
            config_kwargs["poll_interval"] = _env_float(interval_env, "MPK_POLL_INTERVAL")

        # An empty value means "no explicit timeout"
        timeout_env = env.get("MPK_REQUEST_TIMEOUT")
        if timeout_env is not None and "request_timeout" not in overrides:
            stripped = timeout_env.strip()
            config_kwargs["request_timeout"] = _env_float(stripped, "MPK_REQUEST_TIMEOUT") if stripped else None

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
