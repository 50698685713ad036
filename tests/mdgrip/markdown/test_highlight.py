import io

from pygments.lexers import PythonLexer, TextLexer

from mdgrip.markdown.highlight import format_code, get_lexer, get_style_css, resolve_lexer


class TestResolveLexer:
    def test_by_alias(self):
        assert "python" in resolve_lexer("python", "").aliases
        assert "python" in resolve_lexer("py", "").aliases

    def test_first_word_only(self):
        assert "python" in resolve_lexer("python {linenos=true}", "").aliases

    def test_unknown_language_is_plain_text(self):
        assert isinstance(resolve_lexer("nosuchlanguage", "x = 1"), TextLexer)

    def test_guessed_from_content(self):
        assert "python" in resolve_lexer("", "#!/usr/bin/env python\nprint(1)\n").aliases

    def test_get_lexer_unknown(self):
        assert get_lexer("nosuchlanguage") is None


class TestFormatCode:
    def test_class_based_html(self):
        out = io.StringIO()
        format_code("print('hi')\n", PythonLexer(), out)
        html = out.getvalue()
        assert html.startswith('<div class="highlight"><pre>')
        assert '<span class="nb">print</span>' in html
        assert "style=" not in html

    def test_unknown_style_falls_back(self, log_messages):
        out = io.StringIO()
        format_code("text\n", TextLexer(), out, style="nosuchstyle")
        assert '<div class="highlight">' in out.getvalue()
        assert any("nosuchstyle" in message for message in log_messages)

    def test_style_css(self):
        css = get_style_css("monokai")
        assert ".highlight .k" in css
