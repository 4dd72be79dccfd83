#!/usr/bin/env python3
"""Tea Timer — entry point.

Run with:
    python main.py
    python -m teatimer
    DEBUG=1 python main.py    # write ./debug.log
"""

from teatimer.__main__ import main


if __name__ == "__main__":
    main()
