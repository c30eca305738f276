# tripboard/cli/commands.py

from tripboard.core.encoding import encode_base64
from tripboard.core.identity import parse_name_with_trip
from tripboard.core.selftest import run_selftest
from tripboard.core.sha1 import sha1_digest


def print_banner(settings):
    print("tripboard started")
    print(f"Placeholder name: {settings.placeholder}   Marker: {settings.marker}")
    print("Type name#secret to derive a tripcode, /help for commands.\n")


def print_menu(settings, ui_url):
    print("\n=== tripboard ===")
    print(f"Placeholder: {settings.placeholder}")
    print(f"UI: {ui_url or 'disabled'}")
    print("Commands: /menu /help /logs /trip /digest /selftest /quit\n")


def print_help():
    print(
        "\nCommands:\n"
        "  /trip <name#secret>    Parse a name field and show the tripcode\n"
        "  /digest <text>         Show the 160-bit digest of text\n"
        "  /selftest              Check the digest against reference vectors\n"
        "  /logs                  Show recent logs\n"
        "  /menu                  Show the main menu\n"
        "  /help                  Show this help\n"
        "  /quit                  Exit\n"
        "Lines without a leading '/' are treated as /trip.\n"
    )


def show_identity(raw, settings, record_log=None):
    identity = parse_name_with_trip(raw, placeholder=settings.placeholder, marker=settings.marker)
    print(f"  name:    {identity.name}")
    print(f"  trip:    {identity.trip or '-'}")
    print(f"  display: {identity.display()}")
    if identity.trip and record_log:
        record_log(f"Derived trip {identity.trip}")
    return identity


def show_selftest():
    results = run_selftest()
    failed = [r for r in results if not r.ok]
    for result in results:
        status = "ok" if result.ok else "FAIL"
        print(f"  [{status}] {result.message[:24]!r:<28} {result.actual}")
        if not result.ok:
            print(f"         expected {result.expected} (library {result.library})")
    print(f"{len(results) - len(failed)}/{len(results)} vectors passed.\n")
    return not failed


def handle_command(line, settings, logs=None, show_menu=None, record_log=None):
    """
    Handle a single CLI command.
    Returns False if the app should exit.
    """
    if line in ("/quit", "/exit"):
        return False

    if line == "/menu":
        if show_menu:
            show_menu()
        else:
            print_help()
        return True

    if line == "/help":
        print_help()
        return True

    if line == "/logs":
        if not logs:
            print("No logs yet.")
            return True
        print("\nRecent logs:")
        for entry in logs:
            print(f"  {entry}")
        print()
        return True

    if line == "/selftest":
        passed = show_selftest()
        if record_log:
            record_log(f"Self-test {'passed' if passed else 'FAILED'}")
        return True

    if line == "/digest" or line.startswith("/digest "):
        text = line[len("/digest "):]
        digest = sha1_digest(text.encode("utf-8"))
        print(f"  hex:    {digest.hex()}")
        print(f"  base64: {encode_base64(digest)}")
        return True

    if line == "/trip" or line.startswith("/trip "):
        show_identity(line[len("/trip "):], settings, record_log)
        return True

    if not line.startswith("/"):
        show_identity(line, settings, record_log)
        return True

    print("Unknown command. Type /help.")
    return True
