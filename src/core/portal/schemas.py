"""
Schemas dos formulários do portal.

Seis schemas, um por formulário:
- contact_schema: formulário de contato
- sign_up_schema / sign_in_schema: autenticação
- subject_schema, pdf_schema, video_schema: painel de gestão

As mensagens são exibidas diretamente ao usuário.
"""

import re

from src.core.validation import rules
from src.core.validation.rules import FILE, Field, Schema
from src.core.validation.youtube import is_youtube_url

from .dtos import (
    ContactMessageInputDTO,
    PdfInputDTO,
    SignInInputDTO,
    SignUpInputDTO,
    SubjectInputDTO,
    VideoInputDTO,
)


MAX_PDF_SIZE = 50 * 1024 * 1024  # 50 MiB
PDF_MEDIA_TYPE = "application/pdf"


def _email_field() -> Field:
    return Field(
        "email",
        rules=(
            rules.max_length(255, "Email must be less than 255 characters"),
            rules.email("Invalid email address"),
        ),
    )


def _description_field(limit: int) -> Field:
    return Field(
        "description",
        optional=True,
        rules=(rules.max_length(limit, f"Description must be less than {limit} characters"),),
    )


def _subject_id_field() -> Field:
    return Field("subject_id", rules=(rules.uuid("Invalid subject selected"),))


contact_schema = Schema(
    name="contact",
    output=ContactMessageInputDTO,
    fields=(
        Field(
            "name",
            rules=(
                rules.min_length(1, "Name is required"),
                rules.max_length(100, "Name must be less than 100 characters"),
                # Apenas letras ASCII, como no formulário original
                rules.matches(
                    r"[a-zA-Z\s\-']+",
                    "Name can only contain letters, spaces, hyphens, and apostrophes",
                    re.ASCII,
                ),
            ),
        ),
        _email_field(),
        Field(
            "message",
            rules=(
                rules.min_length(10, "Message must be at least 10 characters"),
                rules.max_length(2000, "Message must be less than 2000 characters"),
            ),
        ),
    ),
)

sign_up_schema = Schema(
    name="sign_up",
    output=SignUpInputDTO,
    fields=(
        Field(
            "full_name",
            rules=(
                rules.min_length(2, "Full name must be at least 2 characters"),
                rules.max_length(100, "Full name must be less than 100 characters"),
            ),
        ),
        _email_field(),
        Field(
            "password",
            trim=False,
            rules=(
                rules.min_length(8, "Password must be at least 8 characters"),
                rules.contains(r"[A-Z]", "Password must contain at least one uppercase letter"),
                rules.contains(r"[a-z]", "Password must contain at least one lowercase letter"),
                rules.contains(r"[0-9]", "Password must contain at least one number"),
            ),
        ),
    ),
)

sign_in_schema = Schema(
    name="sign_in",
    output=SignInInputDTO,
    fields=(
        _email_field(),
        Field(
            "password",
            trim=False,
            rules=(rules.min_length(1, "Password is required"),),
        ),
    ),
)

subject_schema = Schema(
    name="subject",
    output=SubjectInputDTO,
    fields=(
        Field(
            "name",
            rules=(
                rules.min_length(3, "Subject name must be at least 3 characters"),
                rules.max_length(100, "Subject name must be less than 100 characters"),
            ),
        ),
        _description_field(500),
    ),
)

pdf_schema = Schema(
    name="pdf",
    output=PdfInputDTO,
    fields=(
        Field(
            "title",
            rules=(
                rules.min_length(5, "PDF title must be at least 5 characters"),
                rules.max_length(200, "PDF title must be less than 200 characters"),
            ),
        ),
        _description_field(1000),
        _subject_id_field(),
        Field(
            "file",
            kind=FILE,
            required_message="A PDF file is required",
            rules=(
                rules.media_type(PDF_MEDIA_TYPE, "File must be a PDF"),
                rules.max_size(MAX_PDF_SIZE, "PDF must be less than 50MB"),
            ),
        ),
    ),
)

video_schema = Schema(
    name="video",
    output=VideoInputDTO,
    fields=(
        Field(
            "title",
            rules=(
                rules.min_length(5, "Video title must be at least 5 characters"),
                rules.max_length(200, "Video title must be less than 200 characters"),
            ),
        ),
        _description_field(1000),
        _subject_id_field(),
        Field(
            "youtube_url",
            rules=(
                rules.url("Invalid URL format"),
                rules.Rule(is_youtube_url, "Must be a valid YouTube URL"),
            ),
        ),
    ),
)


SCHEMAS = {
    schema.name: schema
    for schema in (
        contact_schema,
        sign_up_schema,
        sign_in_schema,
        subject_schema,
        pdf_schema,
        video_schema,
    )
}
