"""
Data Transfer Objects (DTOs) do Domínio do Portal.

Tipos de DTOs:
- Input DTOs: construídos apenas a partir de dados já validados e
  normalizados pelos schemas (src/core/portal/schemas.py)
- Output DTOs: formatam entidades para as views e templates

Os nomes de campos seguem snake_case (full_name, subject_id,
youtube_url).
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from .entities import ContactMessageEntity, PdfEntity, SubjectEntity, VideoEntity


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class ContactMessageInputDTO:
    """
    Mensagem de contato validada.

    Attributes:
        name: Nome do remetente (letras, espaços, hífens e apóstrofos)
        email: E-mail de resposta
        message: Texto da mensagem (10 a 2000 caracteres)
    """

    name: str
    email: str
    message: str

    def to_dict(self) -> dict:
        return {"name": self.name, "email": self.email, "message": self.message}


@dataclass(frozen=True)
class SignUpInputDTO:
    """Cadastro validado. A senha não é aparada."""

    full_name: str
    email: str
    password: str

    def __repr__(self) -> str:
        return f"SignUpInputDTO(full_name={self.full_name!r}, email={self.email!r})"


@dataclass(frozen=True)
class SignInInputDTO:
    email: str
    password: str

    def __repr__(self) -> str:
        return f"SignInInputDTO(email={self.email!r})"


@dataclass(frozen=True)
class SubjectInputDTO:
    name: str
    description: Optional[str] = None

    def to_dict(self) -> dict:
        return {"name": self.name, "description": self.description}


@dataclass(frozen=True)
class PdfInputDTO:
    """
    Envio de PDF validado.

    Attributes:
        title: Título do material
        subject_id: UUID da matéria
        file: Arquivo enviado (expõe name, content_type, size e read())
        description: Descrição opcional
    """

    title: str
    subject_id: str
    file: Any
    description: Optional[str] = None

    @property
    def extension(self) -> str:
        """Extensão do nome original do arquivo ("pdf" se ausente)."""
        name = getattr(self.file, "name", "") or ""
        if "." in name:
            return name.rsplit(".", 1)[-1].lower()
        return "pdf"


@dataclass(frozen=True)
class VideoInputDTO:
    title: str
    subject_id: str
    youtube_url: str
    description: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "subject_id": self.subject_id,
            "youtube_url": self.youtube_url,
            "description": self.description,
        }


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

@dataclass(frozen=True)
class SubjectOutputDTO:
    id: str
    name: str
    description: Optional[str]
    created_at: datetime

    @classmethod
    def from_entity(cls, subject: SubjectEntity) -> "SubjectOutputDTO":
        return cls(
            id=subject.id,
            name=subject.name,
            description=subject.description,
            created_at=subject.created_at,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "created_at": self.created_at.isoformat(),
        }


@dataclass(frozen=True)
class PdfOutputDTO:
    """PDF pronto para exibição (inclui tamanho legível)."""

    id: str
    subject_id: str
    title: str
    description: Optional[str]
    file_url: str
    file_size: int
    size_label: str
    created_at: datetime

    @classmethod
    def from_entity(cls, pdf: PdfEntity) -> "PdfOutputDTO":
        return cls(
            id=pdf.id,
            subject_id=pdf.subject_id,
            title=pdf.title,
            description=pdf.description,
            file_url=pdf.file_url,
            file_size=pdf.file_size,
            size_label=pdf.size_label,
            created_at=pdf.created_at,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "subject_id": self.subject_id,
            "title": self.title,
            "description": self.description,
            "file_url": self.file_url,
            "file_size": self.file_size,
            "size_label": self.size_label,
            "created_at": self.created_at.isoformat(),
        }


@dataclass(frozen=True)
class VideoOutputDTO:
    """Vídeo pronto para exibição (com URL de embed)."""

    id: str
    subject_id: str
    title: str
    description: Optional[str]
    youtube_url: str
    video_id: str
    embed_url: str
    thumbnail_url: str
    created_at: datetime

    @classmethod
    def from_entity(cls, video: VideoEntity) -> "VideoOutputDTO":
        return cls(
            id=video.id,
            subject_id=video.subject_id,
            title=video.title,
            description=video.description,
            youtube_url=video.youtube_url,
            video_id=video.video_id,
            embed_url=video.embed_url,
            thumbnail_url=video.thumbnail_url,
            created_at=video.created_at,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "subject_id": self.subject_id,
            "title": self.title,
            "description": self.description,
            "youtube_url": self.youtube_url,
            "video_id": self.video_id,
            "embed_url": self.embed_url,
            "thumbnail_url": self.thumbnail_url,
            "created_at": self.created_at.isoformat(),
        }


@dataclass(frozen=True)
class ContactMessageOutputDTO:
    id: str
    name: str
    email: str
    message: str
    created_at: datetime

    @classmethod
    def from_entity(cls, contact: ContactMessageEntity) -> "ContactMessageOutputDTO":
        return cls(
            id=contact.id,
            name=contact.name,
            email=contact.email,
            message=contact.message,
            created_at=contact.created_at,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "message": self.message,
            "created_at": self.created_at.isoformat(),
        }


@dataclass(frozen=True)
class UserOutputDTO:
    """
    Usuário autenticado devolvido pelo AuthGateway.

    Attributes:
        id: ID do usuário no store externo
        email: E-mail (também é o login)
        full_name: Nome completo
        is_admin: Acesso ao painel de gestão
    """

    id: str
    email: str
    full_name: str = ""
    is_admin: bool = False

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "email": self.email,
            "full_name": self.full_name,
            "is_admin": self.is_admin,
        }


@dataclass(frozen=True)
class DashboardStatsDTO:
    """Totais exibidos nas abas do painel de gestão."""

    pdf_count: int
    video_count: int
