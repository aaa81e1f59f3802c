"""Command-line entry point for dirpane.

1. Read command line arguments or the previously saved root.
2. Check that the root really is a directory.
3. Launch the interactive browser.
4. Save the root for next time, or log crash information.
"""

from __future__ import annotations

import argparse
import sys
import traceback
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from dirpane import __version__
from dirpane.browser import DirPaneBrowser, DirPaneBrowserError
from dirpane.config import get_browser_settings, get_key_bindings, get_last_root, save_last_root

# Crash dump file location
CRASH_LOG_FILE = Path.home() / "dirpane.crash.txt"


def validate_directory(path: Path, name: str) -> Path:
    """Check that a path exists and points to a directory.

    A bad path (a typo, or a file instead of a folder) does not stop the
    program: we warn on stderr and fall back to the current directory.

    Args:
        path: Candidate path supplied by the user or the saved session.
        name: Human-readable description used in warnings, e.g. ``"root"``.

    Returns:
        ``path`` when it checks out, otherwise ``Path.cwd()``.
    """
    try:
        resolved = path.resolve()
        if not resolved.exists():
            print(f"Warning: {name} directory does not exist: {path}", file=sys.stderr)
            print("   Using current directory instead", file=sys.stderr)
            return Path.cwd()
        if not resolved.is_dir():
            print(f"Warning: {name} path is not a directory: {path}", file=sys.stderr)
            print("   Using current directory instead", file=sys.stderr)
            return Path.cwd()
        return path
    except (OSError, RuntimeError) as e:
        print(f"Warning: Cannot access {name} directory: {path}", file=sys.stderr)
        print(f"   Error: {e}", file=sys.stderr)
        print("   Using current directory instead", file=sys.stderr)
        return Path.cwd()


def write_crash_log(exception: BaseException) -> None:
    """Append a crash report to :data:`CRASH_LOG_FILE`."""
    try:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        crash_info = f"""
================================================================================
dirpane Crash Report
================================================================================
Timestamp: {timestamp}
Version: {__version__}
Python: {sys.version}
Platform: {sys.platform}

Exception Type: {type(exception).__name__}
Exception Message: {exception}

Traceback:
{"".join(traceback.format_exception(type(exception), exception, exception.__traceback__))}
================================================================================
"""
        with open(CRASH_LOG_FILE, "a", encoding="utf-8") as f:
            f.write(crash_info)

        print("\ndirpane crashed unexpectedly!", file=sys.stderr)
        print(f"   Crash details saved to: {CRASH_LOG_FILE}", file=sys.stderr)
        print("   Please report this issue with the crash log.", file=sys.stderr)
    except OSError:
        # If we can't even write the crash log, just print to stderr
        print("\ndirpane crashed and could not write crash log!", file=sys.stderr)
        traceback.print_exception(type(exception), exception, exception.__traceback__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments for the browser."""
    parser = argparse.ArgumentParser(
        prog="dirpane",
        description="Browse directories and their files side-by-side in the terminal.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
        help="Show version number and exit.",
    )
    parser.add_argument(
        "--page-size",
        type=int,
        default=None,
        help="Entries to jump on PageUp/PageDown (default: from config, 50).",
    )
    parser.add_argument(
        "--hidden",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Show or hide dot-entries (default: from config).",
    )
    parser.add_argument(
        "root_directory",
        nargs="?",
        default=None,
        help="Directory whose subdirectories are listed (default: last used).",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Launch the browser and remember the root for next time."""
    try:
        args = parse_args(argv)

        # curses needs a real terminal
        if not sys.stdout.isatty():
            print("The dual-pane browser requires an interactive terminal.")
            return 1

        if args.root_directory is None:
            root = validate_directory(Path(get_last_root()).expanduser(), "root (from session)")
        else:
            root = validate_directory(Path(args.root_directory).expanduser(), "root")

        settings = get_browser_settings()
        page_size = args.page_size if args.page_size is not None else settings["page_size"]
        show_hidden = args.hidden if args.hidden is not None else settings["show_hidden"]

        browser = DirPaneBrowser(
            str(root),
            page_size=page_size,
            bindings=get_key_bindings(),
            show_hidden=show_hidden,
            include_root=settings["include_root"],
        )
        final_directory = browser.browse()

        save_last_root(str(root.resolve()))
        print(f"Selected directory: {final_directory}")
        return 0

    except DirPaneBrowserError as err:
        print(f"Could not start browser: {err}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130
    except Exception as e:
        write_crash_log(e)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
