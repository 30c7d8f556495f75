from player_registry.config.settings import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("DATA_FILE", raising=False)

    cfg = Settings(_env_file=None)

    assert cfg.DATA_FILE == "data.json"
    assert set(Settings.model_fields) == {"DATA_FILE"}


def test_env_override(monkeypatch, tmp_path):
    target = tmp_path / "players.json"
    monkeypatch.setenv("DATA_FILE", str(target))

    assert Settings(_env_file=None).DATA_FILE == str(target)
