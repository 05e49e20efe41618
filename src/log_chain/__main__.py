"""Module entry point so ``python -m log_chain`` behaves like the console script.

Without arguments the reference demo runs: one warning printed to stdout, one
error appended to ``logs.txt``, and two ``Exception: ...`` lines on stderr.
"""

from __future__ import annotations

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
