"""
Tests for template loading and generator failure reporting.
"""

import pytest

from request_explorer.codegen import (
    CodeGenerator,
    GeneratorError,
    RequestDescriptor,
    generate_code_result,
    get_generator,
)
from request_explorer.codegen.core.templates import TemplateEngine, TemplateError


class _NoTemplateGenerator(CodeGenerator):
    @property
    def language_name(self):
        return "none"

    @property
    def display_name(self):
        return "None"

    @property
    def file_extension(self):
        return ".txt"


@pytest.mark.parametrize(
    "language, template",
    [
        ("curl", "command.sh.j2"),
        ("javascript", "fetch.js.j2"),
        ("python", "requests.py.j2"),
        ("php", "curl.php.j2"),
        ("csharp", "Program.cs.j2"),
        ("go", "main.go.j2"),
    ],
)
def test_each_generator_ships_its_template(language, template):
    generator = get_generator(language)
    assert generator.template_name == template
    assert generator.template_exists(template)


def test_missing_template_raises(tmp_path):
    engine = TemplateEngine(tmp_path)
    assert not engine.template_exists("absent.j2")
    with pytest.raises(TemplateError):
        engine.render_template("absent.j2", {})


def test_undefined_variables_are_errors(tmp_path):
    (tmp_path / "t.j2").write_text("{{ missing }}", encoding="utf-8")
    with pytest.raises(TemplateError):
        TemplateEngine(tmp_path).render_template("t.j2", {})


def test_quote_filter(tmp_path):
    (tmp_path / "t.j2").write_text("\"{{ v | quote }}\" '{{ v | quote(\"'\") }}'\n", encoding="utf-8")
    assert TemplateEngine(tmp_path).render_template("t.j2", {"v": "a\"b'c"}) == (
        "\"a\\\"b'c\" 'a\"b\\'c'"
    )


def test_generator_without_template():
    generator = _NoTemplateGenerator()
    descriptor = RequestDescriptor.create("GET", "https://x")

    with pytest.raises(GeneratorError):
        generator.render(descriptor)

    result = generate_code_result(generator, descriptor)
    assert not result.success
    assert result.code == ""
    assert isinstance(result.exception, GeneratorError)
