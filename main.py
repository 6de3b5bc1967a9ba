"""Run a hard-sphere density simulation: python main.py N len iterations [output_path]."""

import sys

from hardspheres.cli import main

if __name__ == "__main__":
    sys.exit(main())
