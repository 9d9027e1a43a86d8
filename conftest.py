"""
Root conftest.py for the catalog search project.

Puts the service directory on sys.path so the ``app`` package is importable
when tests run from a source checkout without installing it.
"""

import sys
from pathlib import Path


def pytest_configure(config):
    """
    Configure pytest to add the service directory to sys.path.

    Runs before test modules and their conftest files are imported.
    """
    root_dir = Path(__file__).parent
    service_path = root_dir / "services" / "search-service"

    if str(service_path) not in sys.path:
        sys.path.insert(0, str(service_path))
