from __future__ import annotations

import sys
from pathlib import Path


def pytest_configure() -> None:
    # Import `toolchain_versions` from the checkout without an install.
    sys.path.insert(0, str(Path(__file__).resolve().parents[1]))
