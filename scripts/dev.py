#!/usr/bin/env python3
"""
Dev runner: API server with auto-reload.
Usage: python scripts/dev.py
"""

import os
import socket
import sys
from pathlib import Path

import uvicorn

ROOT = Path(__file__).resolve().parent.parent
BACKEND_PORT = int(os.environ.get("BACKEND_PORT", "8000"))
API_BASE = f"http://localhost:{BACKEND_PORT}"


def port_in_use(port: int) -> bool:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        return s.connect_ex(("127.0.0.1", port)) == 0


def main():
    os.chdir(ROOT)
    if str(ROOT) not in sys.path:
        sys.path.insert(0, str(ROOT))

    if port_in_use(BACKEND_PORT):
        print(f"Port {BACKEND_PORT} is in use. Stop the process or set BACKEND_PORT=<port>")
        sys.exit(1)

    print()
    print(f"  API docs: {API_BASE}/docs")
    print()

    uvicorn.run(
        "server.app:app",
        host="0.0.0.0",
        port=BACKEND_PORT,
        reload=True,
        reload_dirs=[str(ROOT / "server"), str(ROOT / "study")],
    )


if __name__ == "__main__":
    main()
