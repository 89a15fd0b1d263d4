"""
Allow running the downloader as a Python module.

Usage:
    python -m lambda_fetch ARN [--dest PATH] [--verbose]
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
