from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

from flask import Flask

from tripboard.ui.constants import MAX_INPUT_BYTES
from tripboard.ui.routes import configure_routes

logger = logging.getLogger(__name__)


class UIServer:
    """
    Thin Flask API over the identity core.
    - No storage
    - No rendering
    - No state beyond settings
    """

    def __init__(self, settings, on_event: Optional[Callable[[str], None]] = None):
        self.settings = settings
        self.on_event = on_event

        self.app = Flask(__name__)
        self.app.config["MAX_CONTENT_LENGTH"] = MAX_INPUT_BYTES
        configure_routes(self.app, self)

    # ---------------- lifecycle ----------------

    def run(self, host: str = "127.0.0.1", port: int = 5000):
        thread = threading.Thread(
            target=self.app.run,
            kwargs={
                "host": host,
                "port": port,
                "debug": False,
                "use_reloader": False,
                "threaded": True,
            },
            daemon=True,
        )
        thread.start()
        logger.debug("UI thread started on %s:%s", host, port)
        return thread

    # ---------------- events ----------------

    def emit(self, message: str):
        if self.on_event:
            self.on_event(message)


def run_ui_server(
    settings,
    on_event: Optional[Callable[[str], None]] = None,
    host: str = "127.0.0.1",
    port: int = 5000,
) -> UIServer:
    """
    Convenience helper.
    """
    ui = UIServer(settings=settings, on_event=on_event)
    ui.run(host=host, port=port)
    return ui
