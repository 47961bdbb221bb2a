"""SnapDrawer - draggable bottom drawer demo."""
from __future__ import annotations

from snapdrawer.app import main
from snapdrawer.logging import log


if __name__ == "__main__":
    try:
        main()
    except Exception as e:
        log(f"[FATAL] Fatal error: {e!r}")
        raise SystemExit(1)
