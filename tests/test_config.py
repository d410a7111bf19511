from wanikani_sentences.config import DEFAULT_CONFIG, cfg_get, load_config


def test_missing_file_gives_defaults(tmp_path):
    cfg = load_config(tmp_path / "nope.yaml")

    assert cfg == DEFAULT_CONFIG
    assert cfg is not DEFAULT_CONFIG


def test_yaml_is_merged_over_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("fetch:\n  timeout_sec: 5\nexport:\n  per_level: false\n", encoding="utf-8")

    cfg = load_config(path)

    assert cfg_get(cfg, "fetch.timeout_sec", 30) == 5
    assert cfg_get(cfg, "export.per_level", True) is False
    assert cfg_get(cfg, "export.delay_sec", None) == 0.3
    assert cfg_get(cfg, "api.base_url", "") == "https://api.wanikani.com/v2"


def test_invalid_yaml_falls_back(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("fetch: [unclosed\n", encoding="utf-8")

    assert load_config(path) == DEFAULT_CONFIG


def test_non_mapping_yaml_falls_back(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")

    assert load_config(path) == DEFAULT_CONFIG


def test_cfg_get_default_for_missing_path():
    assert cfg_get({"a": {"b": 1}}, "a.c", "x") == "x"
    assert cfg_get({"a": 1}, "a.b", None) is None
