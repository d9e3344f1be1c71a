"""Convenience shim to run the fork analysis workflow."""

from __future__ import annotations

import sys

from src.forks.runner import main as analysis_main


if __name__ == "__main__":
    sys.exit(analysis_main(sys.argv[1:]))
