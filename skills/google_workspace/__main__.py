"""
Entry point for the Google Workspace skill subprocess.

Run with: python -m skills.google_workspace
"""

from __future__ import annotations

import asyncio
import logging
import sys

logging.basicConfig(
  level=logging.INFO,
  format="[%(name)s] %(levelname)s: %(message)s",
  stream=sys.stderr,
)


def main() -> None:
  from .server import run_server

  try:
    asyncio.run(run_server())
  except KeyboardInterrupt:
    pass


if __name__ == "__main__":
  main()
