from pathlib import Path

import pytest
import yaml

from slack_term.config.app import AppConfig, MarkdownConfig, load_app_config


class TestAppConfig:
    """AppConfig Pydanticモデルのテスト"""

    def test_default_values(self) -> None:
        """デフォルト値が正しく設定されること"""
        config = AppConfig()
        assert config.message_limit == 50
        assert config.show_timestamps is True
        assert config.timestamp_format == "%H:%M"
        assert config.markdown == MarkdownConfig(enabled=True, syntax_theme="monokai")
        assert config.theme.preset == "default"

    def test_custom_values(self) -> None:
        """カスタム値が正しく設定されること"""
        config = AppConfig(
            message_limit=20,
            markdown=MarkdownConfig(enabled=False, syntax_theme="dracula"),
        )
        assert config.message_limit == 20
        assert config.markdown.enabled is False
        assert config.markdown.syntax_theme == "dracula"

    def test_reject_unknown_fields(self) -> None:
        """未知のフィールドでエラーになること"""
        with pytest.raises(ValueError):
            AppConfig(unknown_field="value")  # type: ignore[call-arg]


class TestLoadAppConfig:
    """load_app_config関数のテスト"""

    def test_load_from_yaml_file(self, tmp_path: Path) -> None:
        """YAMLファイルから正しく読み込めること"""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            yaml.dump({
                "message_limit": 20,
                "show_timestamps": False,
                "markdown": {"enabled": False, "syntax_theme": "native"},
                "theme": {
                    "preset": "dark",
                    "markdown_style": {"user_mention": {"foreground": "#ff0000", "attributes": "bold|italic"}},
                },
            })
        )

        config = load_app_config(config_file)
        assert config.message_limit == 20
        assert config.show_timestamps is False
        assert config.markdown.enabled is False
        assert config.markdown.syntax_theme == "native"
        assert config.theme.preset == "dark"
        user_mention = config.theme.markdown_style.user_mention
        assert user_mention is not None
        assert user_mention.foreground == "#ff0000"
        assert user_mention.attributes == frozenset({"bold", "italic"})

    def test_load_with_default_values(self, tmp_path: Path) -> None:
        """一部の値のみ指定した場合、デフォルト値が使われること"""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(yaml.dump({"message_limit": 5}))

        config = load_app_config(config_file)
        assert config.message_limit == 5
        assert config.markdown.enabled is True

    def test_load_empty_yaml(self, tmp_path: Path) -> None:
        """空のYAMLファイルの場合はデフォルト値になること"""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")

        assert load_app_config(config_file) == AppConfig()

    def test_load_fails_when_file_not_exists(self) -> None:
        """ファイルが存在しない場合にエラーになること"""
        with pytest.raises(FileNotFoundError):
            load_app_config(Path("/nonexistent/config.yaml"))

    def test_load_fails_when_invalid_yaml(self, tmp_path: Path) -> None:
        """不正なYAMLの場合にエラーになること"""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("invalid: yaml: content:")

        with pytest.raises(ValueError, match="Invalid YAML file"):
            load_app_config(config_file)

    def test_load_fails_when_not_mapping(self, tmp_path: Path) -> None:
        """トップレベルがマッピングでない場合にエラーになること"""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("- a\n- b\n")

        with pytest.raises(ValueError, match="must be a mapping"):
            load_app_config(config_file)

    def test_reject_unknown_fields_in_yaml(self, tmp_path: Path) -> None:
        """YAMLに未知のフィールドがある場合にエラーになること"""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(yaml.dump({"message_limit": 20, "unknown_field": "value"}))

        with pytest.raises(ValueError, match="Invalid configuration"):
            load_app_config(config_file)

    def test_reject_unknown_style_attribute(self, tmp_path: Path) -> None:
        """スタイルに未知の属性がある場合にエラーになること"""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            yaml.dump({"theme": {"markdown_style": {"link": {"attributes": "sparkle"}}}})
        )

        with pytest.raises(ValueError, match="Invalid configuration"):
            load_app_config(config_file)
