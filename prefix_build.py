#!/usr/bin/env python3
"""
Apply the class prefix to a built site in place.

This is a thin wrapper around classprefix/cli.py so you can run:

  python prefix_build.py --root dist --base-url /app/

See `python prefix_build.py --help` for the flags.
"""

from classprefix.cli import main


if __name__ == "__main__":
    main()
