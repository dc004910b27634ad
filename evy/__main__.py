"""evy CLI entry point.

Allows running via `python -m evy` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from .version import get_version_string

logger = logging.getLogger(__name__)

USAGE = "usage: evy [--version | --keytest | FILE]"


def _escape_bytes(s: str) -> str:
    """Return a printable representation of raw key string."""
    return s.encode('unicode_escape').decode('ascii')


def run_keyboard_test() -> None:
    """Print parsed key events until ESC is pressed."""
    from .terminal import TerminalInterface
    from .keyboard import KeyboardHandler

    print("Keyboard test mode - press keys to see parsed events.")
    print("Quit with ESC.")

    term = TerminalInterface()
    term.setup()
    # Leave the alternate screen so events scroll by as plain lines
    print(term.term.exit_fullscreen, end='', flush=True)
    kb = KeyboardHandler(term)
    try:
        while True:
            ev = kb.get_key_event(timeout=None)
            if not ev:
                continue
            if ev.is_named('escape'):
                print("Exiting keyboard test.\r")
                break
            print(f"type={ev.key_type.value} value={_escape_bytes(ev.value)} "
                  f"raw='{_escape_bytes(ev.raw)}'\r", flush=True)
    finally:
        term.cleanup()


def main(argv: Optional[list[str]] = None) -> None:
    # Very small arg parsing to support keyboard test mode, version, and optional filename
    args = sys.argv[1:] if argv is None else argv
    if args and args[0] in ("--version", "-V"):
        print(get_version_string())
        return
    if args and args[0] in ("--help", "-h"):
        print(USAGE)
        return

    from .log import configure_logging
    from .terminal import TerminalError
    configure_logging()

    try:
        if args and args[0] in ('--keytest', '--keyboard-test'):
            run_keyboard_test()
            return

        # Lazy import to avoid importing UI deps for --version
        from .editor import Editor
        editor = Editor()
        if args:
            editor.load_file(args[0])
        editor.run()
    except TerminalError as e:
        logger.exception("Terminal failure")
        print(f"evy: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":  # pragma: no cover
    main()
