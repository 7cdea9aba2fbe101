"""hireability: Score a developer's public GitHub footprint."""

__version__ = "0.1.0"

import pathlib

DEFAULT_API_URL = "https://api.github.com"

PACKAGE_DIR = pathlib.Path(__file__).parent
