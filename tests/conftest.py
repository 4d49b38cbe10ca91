import pytest

from gdengine.core import config
from gdengine.core.signal import SignalBridge


@pytest.fixture(autouse=True)
def default_precision(monkeypatch):
    """Pin str() precision regardless of GDENGINE_DISPLAY_PRECISION."""
    monkeypatch.setattr(config.settings, "display_precision", 2)


@pytest.fixture()
def bridge():
    return SignalBridge()
