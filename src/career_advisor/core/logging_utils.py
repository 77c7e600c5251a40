from __future__ import annotations

import logging
import os


def configure_logging(verbose: int = 0) -> None:
    """Configure root logging once; later calls only adjust the level."""
    level = logging.DEBUG if (verbose or 0) >= 1 else logging.INFO

    env_level = os.environ.get("LOG_LEVEL", "").strip().upper()
    if env_level:
        resolved = logging.getLevelName(env_level)
        if isinstance(resolved, int):
            level = resolved

    root = logging.getLogger()
    if root.handlers:
        root.setLevel(level)
        for h in root.handlers:
            h.setLevel(level)
        return

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )
    # SDK request logs are noisy at INFO.
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
