import os
import sys

import pytest

# Add the project src directory to PYTHONPATH for tests
CURRENT_DIR = os.path.dirname(__file__)
SRC_PATH = os.path.abspath(os.path.join(CURRENT_DIR, "..", "src"))
if SRC_PATH not in sys.path:
    sys.path.insert(0, SRC_PATH)

from hotel_desk.config import set_config  # noqa: E402
from hotel_desk.tools import set_registry  # noqa: E402


@pytest.fixture(autouse=True)
def reset_globals(monkeypatch):
    """Every test starts from the default environment config and a fresh registry."""
    for key in ("HOTELDESK_CONFIG", "HOTEL_SEED_ROOMS", "HOTEL_NAME", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    set_config(None)
    set_registry(None)
    yield
    set_config(None)
    set_registry(None)
