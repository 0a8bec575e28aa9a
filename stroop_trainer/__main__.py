from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

LOG_LEVEL_ENV = "STROOP_LOG_LEVEL"


def _ensure_repo_root_on_path() -> None:
    """Ensure the repository root (parent of this package) is on ``sys.path``.

    Lets ``python stroop_trainer/__main__.py`` resolve the package the same way
    ``python -m stroop_trainer`` does.
    """
    pkg_dir = Path(__file__).resolve().parent
    repo_root_str = str(pkg_dir.parent)
    if repo_root_str not in sys.path:
        sys.path.insert(0, repo_root_str)


if __package__:
    from .app import run
else:
    _ensure_repo_root_on_path()
    from stroop_trainer.app import run


def main() -> int:
    """Entry point for running the trainer from the command line."""
    level = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    return run()


if __name__ == "__main__":
    raise SystemExit(main())
