# tripboard/config/settings.py

import os

from tripboard.core.identity import DEFAULT_PLACEHOLDER, TRIP_MARKER


class Settings:
    """
    Centralized runtime settings.
    Override via environment variables.

    The trip marker is not read from the environment: stored trips are
    compared as opaque strings, so it stays fixed.
    """

    def __init__(
        self,
        placeholder: str = DEFAULT_PLACEHOLDER,
        marker: str = TRIP_MARKER,
        ui_enabled: bool = True,
        ui_host: str = "127.0.0.1",
        ui_port: int = 5000,
        debug: bool = False,
    ):
        self.placeholder = placeholder
        self.marker = marker
        self.ui_enabled = ui_enabled
        self.ui_host = ui_host
        self.ui_port = ui_port
        self.debug = debug

    @classmethod
    def from_env(cls):
        placeholder = os.getenv("TRIPBOARD_PLACEHOLDER") or DEFAULT_PLACEHOLDER
        ui_enabled = os.getenv("TRIPBOARD_UI", "1") != "0"
        ui_host = os.getenv("TRIPBOARD_UI_HOST", "127.0.0.1")
        ui_port = int(os.getenv("TRIPBOARD_UI_PORT", "5000"))
        debug = os.getenv("TRIPBOARD_DEBUG") == "1"

        return cls(
            placeholder=placeholder,
            ui_enabled=ui_enabled,
            ui_host=ui_host,
            ui_port=ui_port,
            debug=debug,
        )
