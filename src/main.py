"""Run script.

Why it exists:
- Lets you run the CLI with `python -m main` from inside `src/` during development.
- Keeps a simple entry point next to the installed `fetchlab` script.
"""

from __future__ import annotations

import sys

# Rich renders box-drawing and emoji; Windows consoles default to cp1252.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
