"""
Entidades do Domínio do Portal.

Espelham os registros mantidos pelo store externo:

- SubjectEntity: matéria que agrupa PDFs e vídeos
- PdfEntity: material de estudo em PDF de uma matéria
- VideoEntity: vídeo do YouTube vinculado a uma matéria
- ContactMessageEntity: mensagem enviada pelo formulário de contato

As entidades chegam aqui já validadas pelos schemas; as fábricas
`create` só geram identidade e timestamp.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
import uuid

from src.core.validation.youtube import (
    build_embed_url,
    build_thumbnail_url,
    build_watch_url,
)


def _new_id() -> str:
    return str(uuid.uuid4())


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class SubjectEntity:
    """
    Matéria do portal.

    Attributes:
        id: UUID canônico (referenciado por PDFs e vídeos)
        name: Nome único da matéria
        description: Descrição opcional
        created_at: Data de criação (UTC)
    """

    id: str
    name: str
    description: Optional[str] = None
    created_at: datetime = field(default_factory=_now)

    @classmethod
    def create(cls, name: str, description: Optional[str] = None) -> "SubjectEntity":
        return cls(id=_new_id(), name=name, description=description)

    def matches(self, query: Optional[str]) -> bool:
        """
        Busca do navegador de matérias: substring do nome, sem
        diferenciar maiúsculas. Consulta vazia casa com tudo.
        """
        if not query:
            return True
        return query.lower() in self.name.lower()

    def __str__(self) -> str:
        return self.name


@dataclass
class PdfEntity:
    """
    Material em PDF.

    Attributes:
        id: UUID do registro
        subject_id: Matéria à qual pertence
        title: Título exibido
        file_path: Nome do arquivo no storage
        file_url: URL pública para visualização/download
        file_size: Tamanho em bytes
        uploaded_by: ID do admin que enviou
        description: Descrição opcional
        created_at: Data do envio (UTC)
    """

    id: str
    subject_id: str
    title: str
    file_path: str
    file_url: str
    file_size: int
    uploaded_by: Optional[str] = None
    description: Optional[str] = None
    created_at: datetime = field(default_factory=_now)

    @classmethod
    def create(
        cls,
        subject_id: str,
        title: str,
        file_path: str,
        file_url: str,
        file_size: int,
        uploaded_by: Optional[str] = None,
        description: Optional[str] = None,
    ) -> "PdfEntity":
        return cls(
            id=_new_id(),
            subject_id=subject_id,
            title=title,
            file_path=file_path,
            file_url=file_url,
            file_size=file_size,
            uploaded_by=uploaded_by,
            description=description,
        )

    @property
    def size_label(self) -> str:
        """Tamanho legível (ex: "2.40 MB")."""
        size = float(self.file_size)
        for unit in ("B", "KB", "MB"):
            if size < 1024:
                return f"{size:.0f} {unit}" if unit == "B" else f"{size:.2f} {unit}"
            size /= 1024
        return f"{size:.2f} GB"


@dataclass
class VideoEntity:
    """
    Vídeo do YouTube.

    Guarda a URL informada pelo admin e o ID extraído dela; as URLs
    de embed, watch e thumbnail são derivadas do ID.
    """

    id: str
    subject_id: str
    title: str
    youtube_url: str
    video_id: str
    added_by: Optional[str] = None
    description: Optional[str] = None
    created_at: datetime = field(default_factory=_now)

    @classmethod
    def create(
        cls,
        subject_id: str,
        title: str,
        youtube_url: str,
        video_id: str,
        added_by: Optional[str] = None,
        description: Optional[str] = None,
    ) -> "VideoEntity":
        return cls(
            id=_new_id(),
            subject_id=subject_id,
            title=title,
            youtube_url=youtube_url,
            video_id=video_id,
            added_by=added_by,
            description=description,
        )

    @property
    def embed_url(self) -> str:
        return build_embed_url(self.video_id)

    @property
    def watch_url(self) -> str:
        return build_watch_url(self.video_id)

    @property
    def thumbnail_url(self) -> str:
        return build_thumbnail_url(self.video_id)


@dataclass
class ContactMessageEntity:
    """Mensagem recebida pelo formulário de contato."""

    id: str
    name: str
    email: str
    message: str
    created_at: datetime = field(default_factory=_now)

    @classmethod
    def create(cls, name: str, email: str, message: str) -> "ContactMessageEntity":
        return cls(id=_new_id(), name=name, email=email, message=message)
