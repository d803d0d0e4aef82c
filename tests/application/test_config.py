from kanadrill.application.config import AppConfig, resolve_config


def test_defaults(mock_home):
    config = resolve_config()
    assert config.sets == "hiragana"
    assert config.seed is None
    assert config.verbose == 0
    assert config.set_names() == ["hiragana"]


def test_env_overrides_defaults(mock_home, monkeypatch):
    monkeypatch.setenv("KANADRILL_SETS", "katakana")
    monkeypatch.setenv("KANADRILL_SEED", "7")
    config = resolve_config()
    assert config.sets == "katakana"
    assert config.seed == 7


def test_cli_overrides_win_and_none_is_ignored(mock_home, monkeypatch):
    monkeypatch.setenv("KANADRILL_SETS", "katakana")
    config = resolve_config({"sets": "hiragana,katakana", "seed": None})
    assert config.set_names() == ["hiragana", "katakana"]
    assert config.seed is None


def test_toml_file_is_read(mock_home):
    cfg = mock_home / ".config" / "kanadrill" / "config.toml"
    cfg.parent.mkdir(parents=True)
    cfg.write_text('sets = "katakana"\nseed = 3\n', encoding="utf-8")

    config = resolve_config()
    assert config.sets == "katakana"
    assert config.seed == 3


def test_env_beats_toml(mock_home, monkeypatch):
    (mock_home / ".kanadrill.toml").write_text('sets = "katakana"\n', encoding="utf-8")
    monkeypatch.setenv("KANADRILL_SETS", "hiragana")
    assert resolve_config().sets == "hiragana"


def test_sets_accepts_a_list(mock_home):
    config = AppConfig(sets=["katakana", "hiragana"])
    assert config.sets == "katakana,hiragana"
