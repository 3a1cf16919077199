import pytest

from Emitter.Utility.ListenerCeiling import ListenerCeiling


@pytest.fixture(autouse=True)
def fresh_listener_ceiling(monkeypatch):
    # every test starts from the built-in default of 10
    monkeypatch.delenv("EMITTER_MAX_LISTENERS", raising=False)
    ListenerCeiling.clear_instance()
    yield
    ListenerCeiling.clear_instance()
