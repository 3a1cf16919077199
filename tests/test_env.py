import logging
import math

from Emitter.Events.event_emitter import EventEmitter
from Emitter.Utility.ListenerCeiling import ListenerCeiling
from Emitter.Utility.env import get_env_max_listeners, read_env_file


def test_read_env_file(tmp_path):
    env = tmp_path / ".env"
    env.write_text(
        "# settings\n"
        "EMITTER_MAX_LISTENERS=25\n"
        "export NAME='quoted'\n"
        "not a setting\n"
        "\n",
        encoding="utf-8",
    )
    assert read_env_file(str(env)) == {"EMITTER_MAX_LISTENERS": "25", "NAME": "quoted"}


def test_missing_env_file_is_empty(tmp_path):
    assert read_env_file(str(tmp_path / "missing.env")) == {}


def test_default_without_configuration():
    assert get_env_max_listeners() == 10


def test_process_environment(monkeypatch):
    monkeypatch.setenv("EMITTER_MAX_LISTENERS", "3")
    assert get_env_max_listeners() == 3
    monkeypatch.setenv("EMITTER_MAX_LISTENERS", "unbounded")
    assert get_env_max_listeners() == math.inf


def test_process_environment_beats_env_file(monkeypatch, tmp_path):
    env = tmp_path / ".env"
    env.write_text("EMITTER_MAX_LISTENERS=30\n", encoding="utf-8")
    assert get_env_max_listeners(str(env)) == 30
    monkeypatch.setenv("EMITTER_MAX_LISTENERS", "7")
    assert get_env_max_listeners(str(env)) == 7


def test_invalid_values_fall_back(monkeypatch, caplog):
    with caplog.at_level(logging.WARNING, logger="Emitter.Utility.env"):
        for raw in ("-2", "lots", "1.5"):
            monkeypatch.setenv("EMITTER_MAX_LISTENERS", raw)
            assert get_env_max_listeners() == 10
    assert len(caplog.records) == 3


def test_ceiling_reads_environment_on_creation(monkeypatch):
    monkeypatch.setenv("EMITTER_MAX_LISTENERS", "2")
    ListenerCeiling.clear_instance()
    assert EventEmitter().get_max_listeners() == 2


def test_ceiling_reload_from_env_file(tmp_path):
    env = tmp_path / ".env"
    env.write_text('EMITTER_MAX_LISTENERS="0"\n', encoding="utf-8")
    ceiling = ListenerCeiling()
    assert ceiling.reload(str(env)) == 0
    ceiling.value = 8
    ceiling.reset()
    assert ceiling.value == 0
