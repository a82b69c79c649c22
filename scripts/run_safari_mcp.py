#!/usr/bin/env python3
import os
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

print(
    f"[mcp] safari | "
    f"timeout={os.environ.get('SAFARI_PAGE_LOAD_TIMEOUT', '10000')}ms | "
    f"window={os.environ.get('SAFARI_WINDOW_WIDTH', '1280')}x{os.environ.get('SAFARI_WINDOW_HEIGHT', '1024')}"
    f"+{os.environ.get('SAFARI_WINDOW_BOUNDS', '0')}",
    file=sys.stderr,
)

from mcp_servers.safari.main import main  # noqa: E402

if __name__ == "__main__":
    main()
