import pytest

from plotframe.config import Config, ConfigError

SAMPLE = """
# sample settings
grid.line_width: 0.8
grid.color: "#b0b0b0"   # quoted because of the hash

frame.x_margin: 0.05  # trailing comment
x_axis.major.size: 3.5
"""


@pytest.fixture
def config():
    return Config.parse(SAMPLE)


def test_config_basic(config):
    assert config.get("bogus") is None
    assert config.get("grid") is None
    assert config.get("line_width") is None
    assert config.get("grid.line_width") == "0.8"
    assert config.get("major.grid.line_width") == "0.8"
    assert config.get_with_prefix("major.grid", "line_width") == "0.8"


def test_config_escaped_value(config):
    assert config.get("grid.color") == "#b0b0b0"


def test_trailing_comment_is_dropped(config):
    assert config.get("frame.x_margin") == "0.05"


def test_get_as_type_converts(config):
    assert config.get_as_type("x_axis.major", "size", float) == 3.5


def test_get_as_type_missing_is_none(config):
    assert config.get_as_type("x_axis.major", "pad", float) is None


def test_get_as_type_bad_value_raises():
    cfg = Config.parse("a.b: hello\n")
    with pytest.raises(ConfigError):
        cfg.get_as_type("a", "b", float)


def test_missing_colon_raises():
    with pytest.raises(ConfigError):
        Config.parse("name value\n")


def test_unexpected_character_raises():
    with pytest.raises(ConfigError):
        Config.parse("1abc: 2\n")


def test_newline_in_quoted_value_raises():
    with pytest.raises(ConfigError):
        Config.parse('a: "x\n"\n')


def test_later_value_wins():
    assert Config.parse("a: 1\na: 2\n").get("a") == "2"


def test_empty_value_at_end():
    assert Config.parse("a:").get("a") == ""


def test_add_value_trims():
    cfg = Config()
    cfg.add_value("k", "  v  ")
    assert cfg.get("k") == "v"


def test_join(config):
    assert config.join("x_axis", "major") == "x_axis.major"


def test_suffix_fallback_through_many_levels():
    cfg = Config.parse("size: 7\n")
    assert cfg.get_as_type("x_axis.major.ticks", "size", int) == 7