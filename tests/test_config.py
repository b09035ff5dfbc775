import importlib

import resume_inventory.config as cfg


def test_int_env_parsing(monkeypatch):
    monkeypatch.setenv("RESUME_INVENTORY_TEST_INT", "5")
    assert cfg._int_env("RESUME_INVENTORY_TEST_INT", 3) == 5

    monkeypatch.setenv("RESUME_INVENTORY_TEST_INT", "many")
    assert cfg._int_env("RESUME_INVENTORY_TEST_INT", 3) == 3

    monkeypatch.setenv("RESUME_INVENTORY_TEST_INT", "0")
    assert cfg._int_env("RESUME_INVENTORY_TEST_INT", 3) == 3

    monkeypatch.delenv("RESUME_INVENTORY_TEST_INT")
    assert cfg._int_env("RESUME_INVENTORY_TEST_INT", 3) == 3


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("RESUME_INVENTORY_MAX_BULLETS", "2")
    monkeypatch.setenv("RESUME_INVENTORY_LOG_LEVEL", "chatty")
    monkeypatch.setenv("RESUME_INVENTORY_TECH_TOKENS", str(tmp_path / "tokens.json"))
    try:
        reloaded = importlib.reload(cfg)
        assert reloaded.MAX_BULLETS == 2
        assert reloaded.LOG_LEVEL == "WARNING"
        assert reloaded.TECH_TOKENS_PATH == tmp_path / "tokens.json"
    finally:
        monkeypatch.undo()
        importlib.reload(cfg)


def test_bad_env_values_warn_on_stderr_only(monkeypatch, capsys):
    monkeypatch.setenv("RESUME_INVENTORY_TEST_INT", "many")
    monkeypatch.setenv("RESUME_INVENTORY_LOG_LEVEL", "chatty")
    try:
        cfg._int_env("RESUME_INVENTORY_TEST_INT", 3)
        importlib.reload(cfg)
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "RESUME_INVENTORY_TEST_INT" in captured.err
        assert "RESUME_INVENTORY_LOG_LEVEL" in captured.err
    finally:
        monkeypatch.undo()
        importlib.reload(cfg)
