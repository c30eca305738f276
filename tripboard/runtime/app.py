from collections import deque
import logging
import time

from tripboard.cli.commands import handle_command, print_banner, print_menu
from tripboard.config.settings import Settings
from tripboard.ui.server import run_ui_server


def main():
    settings = Settings.from_env()
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.WARNING,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    logging.getLogger("werkzeug").setLevel(logging.ERROR)

    log_buffer = deque(maxlen=200)

    def record_log(message: str):
        stamp = time.strftime("%H:%M:%S")
        log_buffer.append(f"{stamp} {message}")
        logging.getLogger("tripboard").debug(message)

    # --- UI server (non-blocking) ---
    ui_url = None
    if settings.ui_enabled:
        run_ui_server(
            settings=settings,
            on_event=record_log,
            host=settings.ui_host,
            port=settings.ui_port,
        )
        ui_url = f"http://{settings.ui_host}:{settings.ui_port}"
        record_log(f"UI running at {ui_url}")

    # --- CLI ---
    def show_menu():
        print_menu(settings, ui_url)

    print_banner(settings)
    show_menu()

    try:
        while True:
            line = input("> ").strip()
            if not line:
                continue

            should_continue = handle_command(
                line=line,
                settings=settings,
                logs=log_buffer,
                show_menu=show_menu,
                record_log=record_log,
            )

            if not should_continue:
                break

    except (KeyboardInterrupt, EOFError):
        pass
    finally:
        print("\nExiting...")
