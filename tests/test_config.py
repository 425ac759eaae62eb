"""Tests for configuration loading."""

import pytest
from schema import SchemaError

from fluent_text import Text
from fluent_text.config import DEFAULT_CONFIG, get_config, load_config, set_config


def write(tmp_path, content):
    path = tmp_path / "text.toml"
    path.write_text(content)
    return path


class TestLoadConfig:
    def test_empty_file_gives_defaults(self, tmp_path):
        assert load_config(write(tmp_path, "")) == DEFAULT_CONFIG

    def test_values(self, tmp_path):
        path = write(
            tmp_path,
            '[text]\nline-break = "\\r\\n"\n\n[random]\nlength = "8"\ncharacters = "ab"\n',
        )
        config = load_config(path)
        assert config.line_break == "\r\n"
        assert config.random_length == 8
        assert config.random_characters == "ab"

    def test_integer_length(self, tmp_path):
        assert load_config(write(tmp_path, "[random]\nlength = 4\n")).random_length == 4

    def test_padded_string_length(self, tmp_path):
        assert load_config(write(tmp_path, "[random]\nlength = \" 12 \"\n")).random_length == 12

    @pytest.mark.parametrize("length", ['"0"', "-1", '"abc"'])
    def test_invalid_length(self, tmp_path, length):
        with pytest.raises(SchemaError):
            load_config(write(tmp_path, f"[random]\nlength = {length}\n"))

    def test_empty_characters(self, tmp_path):
        with pytest.raises(SchemaError):
            load_config(write(tmp_path, '[random]\ncharacters = ""\n'))

    def test_unknown_key(self, tmp_path):
        with pytest.raises(SchemaError):
            load_config(write(tmp_path, '[other]\nkey = "value"\n'))

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            load_config(tmp_path / "missing.toml")


class TestActiveConfig:
    def test_default(self):
        assert get_config() is DEFAULT_CONFIG

    def test_random_uses_config(self):
        set_config(DEFAULT_CONFIG._replace(random_length=5, random_characters="x"))
        assert str(Text.random()) == "xxxxx"

    def test_reset(self):
        set_config(DEFAULT_CONFIG._replace(random_length=5))
        set_config(None)
        assert get_config() is DEFAULT_CONFIG
