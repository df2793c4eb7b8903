import pytest
from dateutil import tz

from findpay.config import FindPayConfig, load_config
from findpay.exceptions import ConfigError
from findpay.models.index import INDEX_MAX


def test_defaults():
    config = FindPayConfig()
    assert config.timezone is None
    assert config.max_index == INDEX_MAX
    assert config.log_mode is None
    assert config.get_zone() == tz.tzlocal()


def test_load_toml_section(tmp_path):
    path = tmp_path / "findpay.toml"
    path.write_text('[findpay]\ntimezone = "UTC"\nmax_index = 50\n', encoding="UTF-8")
    config = load_config(path)
    assert config.timezone == "UTC"
    assert config.max_index == 50
    assert config.get_zone() == tz.gettz("UTC")


def test_load_yaml_top_level(tmp_path):
    path = tmp_path / "findpay.yaml"
    path.write_text("max_index: 10\nlog_mode: json\n", encoding="UTF-8")
    config = load_config(str(path))
    assert config.max_index == 10
    assert config.log_mode == "json"


def test_load_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="UTF-8")
    assert load_config(path) == FindPayConfig()


def test_load_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "nope.toml")


def test_load_unsupported_suffix(tmp_path):
    path = tmp_path / "findpay.ini"
    path.write_text("[findpay]\n", encoding="UTF-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_load_broken_toml(tmp_path):
    path = tmp_path / "findpay.toml"
    path.write_text("max_index = = 3\n", encoding="UTF-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_load_non_mapping_yaml(tmp_path):
    path = tmp_path / "findpay.yaml"
    path.write_text("- 1\n- 2\n", encoding="UTF-8")
    with pytest.raises(ConfigError):
        load_config(path)


@pytest.mark.parametrize(
    "content",
    ["max_index: 0\n", f"max_index: {INDEX_MAX + 1}\n", "timezone: Mars/Olympus\n",
     "log_mode: xml\n"],
)
def test_load_invalid_values(tmp_path, content):
    path = tmp_path / "findpay.yaml"
    path.write_text(content, encoding="UTF-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_configure_logging_passes_itself(monkeypatch):
    calls = []
    monkeypatch.setattr(
        "findpay.config.setup_logging",
        lambda config, **kwargs: calls.append((config, kwargs)) or config.log_mode,
    )
    config = FindPayConfig(log_mode="json", log_file="payments.log")
    assert config.configure_logging(console_log_level=10) == "json"
    assert calls == [(config, {"console_log_level": 10})]


def test_load_log_file_setting(tmp_path):
    path = tmp_path / "findpay.toml"
    path.write_text('log_mode = "cli"\nlog_file = "logs/parse.log"\n', encoding="UTF-8")
    config = load_config(path)
    assert config.log_file == "logs/parse.log"
    assert FindPayConfig().log_file == "findpay.log"
