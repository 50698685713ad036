import pytest
from pydantic import ValidationError

from mdgrip import Parser, Settings, Theme


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("MDGRIP_THEME", "MDGRIP_CODE_STYLE", "MDGRIP_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    def test_defaults(self):
        settings = Settings()
        assert settings.theme is Theme.AUTO
        assert settings.code_style == "default"
        assert settings.log_level == "INFO"

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("MDGRIP_THEME", "dark")
        monkeypatch.setenv("MDGRIP_CODE_STYLE", "monokai")
        settings = Settings()
        assert settings.theme is Theme.DARK
        assert settings.code_style == "monokai"

    def test_unknown_code_style(self):
        with pytest.raises(ValidationError):
            Settings(code_style="nosuchstyle")

    def test_unknown_theme(self):
        with pytest.raises(ValidationError):
            Settings(theme="sepia")

    def test_log_level_uppercased(self):
        assert Settings(log_level="debug").log_level == "DEBUG"


class TestParserFromSettings:
    def test_options_carried_over(self):
        parser = Parser.from_settings(Settings(theme=Theme.DARK, code_style="monokai"))
        assert parser.theme == "dark"
        assert parser.code_style == "monokai"

    def test_theme_reaches_mermaid(self):
        parser = Parser.from_settings(Settings(theme=Theme.LIGHT))
        html = parser.md_to_html("```mermaid\ngraph TD;\n```").decode()
        assert 'const theme = "default";' in html
