"""
Testes dos seis schemas de formulário do portal.

Cobre limites de tamanho, ordem das regras (primeira falha vence),
trim antes das regras e rejeição de múltiplos campos de uma vez.
"""

import pytest

from src.core.portal.dtos import (
    ContactMessageInputDTO,
    PdfInputDTO,
    SignUpInputDTO,
    SubjectInputDTO,
    VideoInputDTO,
)
from src.core.portal.schemas import (
    MAX_PDF_SIZE,
    SCHEMAS,
    contact_schema,
    pdf_schema,
    sign_in_schema,
    sign_up_schema,
    subject_schema,
    video_schema,
)
from src.core.shared.exceptions import FormValidationError


VALID_SUBJECT_ID = "3f2a9c1e-5b7d-4e8f-9a0b-1c2d3e4f5a6b"
WATCH_URL = "https://www.youtube.com/watch?v=dQw4w9WgXcQ"


def contact(**overrides):
    data = {
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "message": "Could you add more algebra notes?",
    }
    data.update(overrides)
    return data


class TestContactSchema:

    def test_entrada_valida(self):
        dto = contact_schema.parse(contact(name="  Ada Lovelace  "))

        assert isinstance(dto, ContactMessageInputDTO)
        assert dto.name == "Ada Lovelace"

    def test_nome_com_100_caracteres_e_espacos_em_volta(self):
        result = contact_schema.validate(contact(name="   " + "a" * 100 + "   "))
        assert result.ok

    def test_nome_com_101_caracteres(self):
        result = contact_schema.validate(contact(name="   " + "a" * 101 + "   "))
        assert result.errors["name"] == "Name must be less than 100 characters"

    def test_nome_vazio(self):
        result = contact_schema.validate(contact(name="   "))
        assert result.errors["name"] == "Name is required"

    def test_nome_com_caracteres_invalidos(self):
        result = contact_schema.validate(contact(name="R2-D2"))
        assert result.errors["name"] == (
            "Name can only contain letters, spaces, hyphens, and apostrophes"
        )

    def test_nome_aceita_hifen_e_apostrofo(self):
        assert contact_schema.validate(contact(name="Mary-Jane O'Neil")).ok

    def test_nome_rejeita_letras_acentuadas(self):
        result = contact_schema.validate(contact(name="José"))
        assert "name" in result.errors

    def test_tamanho_conta_antes_do_padrao(self):
        result = contact_schema.validate(contact(name="1" * 101))
        assert result.errors["name"] == "Name must be less than 100 characters"

    @pytest.mark.parametrize("message, ok", [
        ("a" * 9, False),
        ("a" * 10, True),
        ("a" * 2000, True),
        ("a" * 2001, False),
    ])
    def test_limites_da_mensagem(self, message, ok):
        assert contact_schema.validate(contact(message=message)).ok is ok

    def test_mensagens_de_limite(self):
        assert contact_schema.validate(contact(message="short")).errors == {
            "message": "Message must be at least 10 characters",
        }
        assert contact_schema.validate(contact(message="a" * 2001)).errors == {
            "message": "Message must be less than 2000 characters",
        }

    def test_email_valido_e_invalidos(self):
        assert contact_schema.validate(contact(email="user@example.com")).ok
        for value in ("user@", "@example.com"):
            errors = contact_schema.validate(contact(email=value)).errors
            assert errors == {"email": "Invalid email address"}

    def test_email_longo_demais(self):
        value = "a" * 250 + "@example.com"
        errors = contact_schema.validate(contact(email=value)).errors
        assert errors == {"email": "Email must be less than 255 characters"}

    def test_reporta_multiplos_campos(self):
        errors = contact_schema.validate(contact(email="user@", message="short")).errors

        assert errors == {
            "email": "Invalid email address",
            "message": "Message must be at least 10 characters",
        }

    def test_campos_ausentes(self):
        errors = contact_schema.validate({}).errors
        assert errors == {"name": "Required", "email": "Required", "message": "Required"}

    def test_tipo_errado(self):
        errors = contact_schema.validate(contact(message=123)).errors
        assert errors == {"message": "Expected string"}

    def test_parse_lanca_com_todos_os_erros(self):
        with pytest.raises(FormValidationError) as exc_info:
            contact_schema.parse(contact(name="", email="bad"))

        assert set(exc_info.value.errors) == {"name", "email"}


class TestSignUpSchema:

    def data(self, **overrides):
        data = {"full_name": "Ada Lovelace", "email": "ada@example.com", "password": "Passw0rd"}
        data.update(overrides)
        return data

    def test_entrada_valida(self):
        dto = sign_up_schema.parse(self.data())

        assert isinstance(dto, SignUpInputDTO)
        assert dto.password == "Passw0rd"
        assert "Passw0rd" not in repr(dto)

    @pytest.mark.parametrize("password, message", [
        ("Pass0rd", "Password must be at least 8 characters"),
        ("password", "Password must contain at least one uppercase letter"),
        ("PASSWORD1", "Password must contain at least one lowercase letter"),
        ("Password", "Password must contain at least one number"),
    ])
    def test_regras_de_senha(self, password, message):
        errors = sign_up_schema.validate(self.data(password=password)).errors
        assert errors == {"password": message}

    def test_senha_nao_e_aparada(self):
        dto = sign_up_schema.parse(self.data(password=" Passw0rd "))
        assert dto.password == " Passw0rd "

    def test_nome_completo(self):
        assert sign_up_schema.validate(self.data(full_name="A")).errors == {
            "full_name": "Full name must be at least 2 characters",
        }
        assert sign_up_schema.validate(self.data(full_name="A" * 101)).errors == {
            "full_name": "Full name must be less than 100 characters",
        }


class TestSignInSchema:

    def test_entrada_valida(self):
        dto = sign_in_schema.parse({"email": " ada@example.com ", "password": "x"})
        assert dto.email == "ada@example.com"

    def test_senha_vazia(self):
        errors = sign_in_schema.validate({"email": "ada@example.com", "password": ""}).errors
        assert errors == {"password": "Password is required"}


class TestSubjectSchema:

    def test_entrada_valida_com_descricao_vazia(self):
        dto = subject_schema.parse({"name": "Physics", "description": "  "})
        assert dto == SubjectInputDTO(name="Physics", description=None)

    def test_descricao_ausente(self):
        assert subject_schema.parse({"name": "Physics"}).description is None

    def test_limites(self):
        assert subject_schema.validate({"name": "AB"}).errors == {
            "name": "Subject name must be at least 3 characters",
        }
        assert subject_schema.validate({"name": "Physics", "description": "d" * 501}).errors == {
            "description": "Description must be less than 500 characters",
        }


class TestPdfSchema:

    def data(self, upload, **overrides):
        data = {"title": "Kinematics notes", "subject_id": VALID_SUBJECT_ID, "file": upload}
        data.update(overrides)
        return data

    def test_entrada_valida(self, pdf_upload):
        dto = pdf_schema.parse(self.data(pdf_upload()))

        assert isinstance(dto, PdfInputDTO)
        assert dto.extension == "pdf"
        assert dto.description is None

    def test_arquivo_ausente(self):
        errors = pdf_schema.validate(self.data(None)).errors
        assert errors == {"file": "A PDF file is required"}

    def test_arquivo_nao_pdf(self, pdf_upload):
        upload = pdf_upload(name="photo.png", content_type="image/png")
        errors = pdf_schema.validate(self.data(upload)).errors
        assert errors == {"file": "File must be a PDF"}

    def test_arquivo_grande_demais(self, pdf_upload):
        assert pdf_schema.validate(self.data(pdf_upload(size=MAX_PDF_SIZE))).ok

        errors = pdf_schema.validate(self.data(pdf_upload(size=MAX_PDF_SIZE + 1))).errors
        assert errors == {"file": "PDF must be less than 50MB"}

    def test_materia_invalida(self, pdf_upload):
        errors = pdf_schema.validate(self.data(pdf_upload(), subject_id="")).errors
        assert errors == {"subject_id": "Invalid subject selected"}

    def test_titulo(self, pdf_upload):
        errors = pdf_schema.validate(self.data(pdf_upload(), title="abcd")).errors
        assert errors == {"title": "PDF title must be at least 5 characters"}

    def test_limite_da_descricao(self, pdf_upload):
        assert pdf_schema.validate(self.data(pdf_upload(), description="d" * 1000)).ok

        errors = pdf_schema.validate(self.data(pdf_upload(), description="d" * 1001)).errors
        assert errors == {"description": "Description must be less than 1000 characters"}

    def test_descricao_so_com_espacos(self, pdf_upload):
        assert pdf_schema.parse(self.data(pdf_upload(), description=" \t\n ")).description is None


class TestVideoSchema:

    def data(self, **overrides):
        data = {"title": "Intro lecture", "subject_id": VALID_SUBJECT_ID, "youtube_url": WATCH_URL}
        data.update(overrides)
        return data

    def test_entrada_valida(self):
        dto = video_schema.parse(self.data(description="Week 1"))

        assert isinstance(dto, VideoInputDTO)
        assert dto.youtube_url == WATCH_URL
        assert dto.description == "Week 1"

    def test_url_mal_formada(self):
        errors = video_schema.validate(self.data(youtube_url="not a url")).errors
        assert errors == {"youtube_url": "Invalid URL format"}

    def test_url_que_nao_e_do_youtube(self):
        errors = video_schema.validate(self.data(youtube_url="https://example.com/video")).errors
        assert errors == {"youtube_url": "Must be a valid YouTube URL"}

    def test_titulo_longo(self):
        errors = video_schema.validate(self.data(title="t" * 201)).errors
        assert errors == {"title": "Video title must be less than 200 characters"}

    def test_limite_da_descricao(self):
        assert video_schema.validate(self.data(description="d" * 1000)).ok

        errors = video_schema.validate(self.data(description="d" * 1001)).errors
        assert errors == {"description": "Description must be less than 1000 characters"}

    def test_descricao_so_com_espacos(self):
        assert video_schema.parse(self.data(description="   ")).description is None


def test_registro_de_schemas():
    assert set(SCHEMAS) == {"contact", "sign_up", "sign_in", "subject", "pdf", "video"}
