"""
Testes do motor de validação (Rule, Field, Schema).

Código puro: nenhum teste aqui acessa banco ou Django.
"""

from dataclasses import dataclass

import pytest

from src.core.shared.exceptions import FormValidationError
from src.core.validation import rules
from src.core.validation.rules import (
    EXPECTED_STRING_MESSAGE,
    FILE,
    REQUIRED_MESSAGE,
    Field,
    Rule,
    Schema,
)


@dataclass(frozen=True)
class NameDTO:
    name: str
    nickname: str = None


@pytest.fixture
def schema():
    return Schema(
        name="person",
        output=NameDTO,
        fields=(
            Field(
                "name",
                rules=(
                    rules.min_length(3, "Too short"),
                    rules.max_length(10, "Too long"),
                    rules.matches(r"[a-z]+", "Lowercase only"),
                ),
            ),
            Field("nickname", optional=True, rules=(rules.max_length(5, "Nickname too long"),)),
        ),
    )


class TestRule:

    def test_check_retorna_none_quando_aceita(self):
        rule = Rule(lambda v: v == "ok", "Not ok")
        assert rule.check("ok") is None

    def test_check_retorna_mensagem_quando_rejeita(self):
        rule = Rule(lambda v: v == "ok", "Not ok")
        assert rule.check("nope") == "Not ok"

    def test_matches_exige_valor_inteiro(self):
        rule = rules.matches(r"[a-z]+", "Letters only")
        assert rule.check("abc") is None
        assert rule.check("abc1") == "Letters only"

    def test_contains_busca_trecho(self):
        rule = rules.contains(r"[0-9]", "Needs digit")
        assert rule.check("abc1def") is None
        assert rule.check("abcdef") == "Needs digit"

    @pytest.mark.parametrize("value", [
        "user@example.com",
        "first.last+tag@sub.example.org",
        "o'brien@example.co",
    ])
    def test_email_aceita(self, value):
        assert rules.email("bad").check(value) is None

    @pytest.mark.parametrize("value", [
        "user@",
        "@example.com",
        "user@example",
        ".user@example.com",
        "us..er@example.com",
        "user name@example.com",
    ])
    def test_email_rejeita(self, value):
        assert rules.email("bad").check(value) == "bad"

    def test_uuid(self):
        rule = rules.uuid("bad")
        assert rule.check("3F2A9C1E-5B7D-4E8F-9A0B-1C2D3E4F5A6B") is None
        assert rule.check("3f2a9c1e5b7d4e8f9a0b1c2d3e4f5a6b") == "bad"
        assert rule.check("not-a-uuid") == "bad"

    def test_url_exige_esquema_e_host(self):
        rule = rules.url("bad")
        assert rule.check("https://example.com/x") is None
        assert rule.check("example.com/x") == "bad"
        assert rule.check("https://") == "bad"
        assert rule.check("http://[::1") == "bad"

    def test_media_type_e_max_size(self, pdf_upload):
        assert rules.media_type("application/pdf", "bad").check(pdf_upload()) is None
        assert rules.media_type("application/pdf", "bad").check(
            pdf_upload(content_type="image/png")
        ) == "bad"
        assert rules.max_size(10, "big").check(pdf_upload(size=10)) is None
        assert rules.max_size(10, "big").check(pdf_upload(size=11)) == "big"


class TestField:

    def test_ausente_obrigatorio(self):
        assert Field("name").clean(None) == (None, REQUIRED_MESSAGE)

    def test_mensagem_de_ausencia_customizada(self):
        field = Field("file", kind=FILE, required_message="A file is required")
        assert field.clean(None) == (None, "A file is required")

    def test_ausente_opcional(self):
        assert Field("name", optional=True).clean(None) == (None, None)

    def test_tipo_errado(self):
        assert Field("name").clean(42) == (None, EXPECTED_STRING_MESSAGE)

    def test_trim_antes_das_regras(self):
        field = Field("name", rules=(rules.max_length(3, "Too long"),))
        assert field.clean("  abc  ") == ("abc", None)

    def test_sem_trim(self):
        field = Field("password", trim=False, rules=(rules.min_length(4, "Too short"),))
        assert field.clean(" ab ") == (" ab ", None)

    def test_opcional_vazio_vira_none(self):
        field = Field("bio", optional=True, rules=(rules.min_length(5, "Too short"),))
        assert field.clean("   ") == (None, None)

    def test_primeira_regra_que_falha_vence(self):
        field = Field(
            "name",
            rules=(
                rules.min_length(5, "Too short"),
                rules.matches(r"[a-z]+", "Lowercase only"),
            ),
        )
        assert field.clean("AB") == (None, "Too short")
        assert field.clean("ABCDEF") == (None, "Lowercase only")


class TestSchema:

    def test_validate_aceita_e_normaliza(self, schema):
        result = schema.validate({"name": "  alice ", "nickname": ""})

        assert result.ok
        assert result.data == {"name": "alice", "nickname": None}
        assert result.errors == {}

    def test_validate_reporta_todos_os_campos(self, schema):
        result = schema.validate({"name": "AB", "nickname": "toolong"})

        assert not result.ok
        assert result.data == {}
        assert result.errors == {"name": "Too short", "nickname": "Nickname too long"}

    def test_validate_ignora_campos_extras(self, schema):
        result = schema.validate({"name": "alice", "extra": "ignored"})
        assert result.data == {"name": "alice", "nickname": None}

    def test_validate_nao_altera_entrada(self, schema):
        data = {"name": "  alice  "}
        schema.validate(data)
        assert data == {"name": "  alice  "}

    def test_parse_retorna_dto(self, schema):
        assert schema.parse({"name": "alice"}) == NameDTO(name="alice", nickname=None)

    def test_parse_lanca_form_validation_error(self, schema):
        with pytest.raises(FormValidationError) as exc_info:
            schema.parse({})

        assert exc_info.value.errors == {"name": REQUIRED_MESSAGE}
        assert exc_info.value.code == "FORM_VALIDATION_ERROR"

    def test_parse_sem_output_retorna_dict(self):
        schema = Schema("plain", fields=(Field("name"),))
        assert schema.parse({"name": " x "}) == {"name": "x"}

    def test_field_names(self, schema):
        assert schema.field_names == ("name", "nickname")
