"""Run the CLI from a plain checkout: `python main.py [doctor ...]`.

The installed `autoproxy` console script and `python -m autoproxy` both need
the package importable. This file does not: it puts `src/` on `sys.path`
first, which is handy when the checkout sits on a WSL guest where nothing has
been pip-installed yet (e.g. `sudo python3 main.py`).
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    project_root = Path(__file__).resolve().parent
    src = project_root / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from autoproxy.cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
