"""
Ports (Interfaces) do Domínio do Portal.

Contratos com o store externo, que é dono do banco, da autenticação
e dos arquivos:

- SubjectRepository, PdfRepository, VideoRepository, ContactRepository
- FileStorage: armazenamento de arquivos com URL pública
- AuthGateway: cadastro e login

Implementações:
- Django: src/adapters/django_app/portal/{repositories,storage,auth}.py
- Memória: classes InMemory* deste módulo (testes e prototipagem)

Example:
    class DjangoSubjectRepository:
        def save(self, subject: SubjectEntity) -> None:
            SubjectMapper.to_model(subject).save()
"""

from dataclasses import replace
from typing import Dict, List, Optional, Protocol, runtime_checkable
import uuid

from src.core.shared.exceptions import AuthenticationError, UpstreamRejectionError

from .dtos import UserOutputDTO
from .entities import ContactMessageEntity, PdfEntity, SubjectEntity, VideoEntity


# =============================================================================
# REPOSITÓRIOS
# =============================================================================

@runtime_checkable
class SubjectRepository(Protocol):
    """
    Persistência de matérias.

    Methods:
        save: Cria a matéria (nome duplicado → UpstreamRejectionError)
        get_by_id: Busca por ID
        exists: Verifica se existe
        list_all: Todas as matérias ordenadas por nome
    """

    def save(self, subject: SubjectEntity) -> None:
        ...

    def get_by_id(self, subject_id: str) -> Optional[SubjectEntity]:
        ...

    def exists(self, subject_id: str) -> bool:
        ...

    def list_all(self) -> List[SubjectEntity]:
        ...


@runtime_checkable
class PdfRepository(Protocol):
    def save(self, pdf: PdfEntity) -> None:
        ...

    def list_by_subject(self, subject_id: str) -> List[PdfEntity]:
        """PDFs da matéria, mais recentes primeiro."""
        ...

    def count(self) -> int:
        ...


@runtime_checkable
class VideoRepository(Protocol):
    def save(self, video: VideoEntity) -> None:
        ...

    def list_by_subject(self, subject_id: str) -> List[VideoEntity]:
        """Vídeos da matéria, mais recentes primeiro."""
        ...

    def count(self) -> int:
        ...


@runtime_checkable
class ContactRepository(Protocol):
    def save(self, contact: ContactMessageEntity) -> None:
        ...

    def list_recent(self) -> List[ContactMessageEntity]:
        """Mensagens de contato, mais recentes primeiro."""
        ...


# =============================================================================
# ARQUIVOS E AUTENTICAÇÃO
# =============================================================================

@runtime_checkable
class FileStorage(Protocol):
    """
    Armazenamento de arquivos do store externo.

    Methods:
        upload: Grava o conteúdo e retorna o nome efetivo do arquivo
        public_url: URL pública de um arquivo gravado
        delete: Remove o arquivo (usado quando o registro não é salvo)
    """

    def upload(self, path: str, content) -> str:
        ...

    def public_url(self, path: str) -> str:
        ...

    def delete(self, path: str) -> None:
        ...


@runtime_checkable
class AuthGateway(Protocol):
    """
    Cadastro e login delegados ao store externo.

    Sessão e tokens ficam com o colaborador; o core só recebe
    o usuário autenticado.
    """

    def sign_up(self, email: str, password: str, full_name: str) -> UserOutputDTO:
        """
        Raises:
            UpstreamRejectionError: E-mail já cadastrado
        """
        ...

    def sign_in(self, email: str, password: str) -> UserOutputDTO:
        """
        Raises:
            AuthenticationError: Credenciais inválidas
        """
        ...


# =============================================================================
# IMPLEMENTAÇÕES EM MEMÓRIA
# =============================================================================

class InMemorySubjectRepository:
    """
    Implementação em memória do SubjectRepository.

    Reproduz a restrição de nome único do store externo.
    """

    def __init__(self):
        self._subjects: Dict[str, SubjectEntity] = {}

    def save(self, subject: SubjectEntity) -> None:
        for existing in self._subjects.values():
            if existing.id != subject.id and existing.name == subject.name:
                raise UpstreamRejectionError(
                    f'Subject "{subject.name}" already exists', operation="create_subject"
                )
        self._subjects[subject.id] = subject

    def get_by_id(self, subject_id: str) -> Optional[SubjectEntity]:
        return self._subjects.get(subject_id)

    def exists(self, subject_id: str) -> bool:
        return subject_id in self._subjects

    def list_all(self) -> List[SubjectEntity]:
        return sorted(self._subjects.values(), key=lambda s: s.name)

    def clear(self) -> None:
        """Limpa todos os dados (útil para testes)."""
        self._subjects.clear()


class InMemoryPdfRepository:
    def __init__(self):
        self._pdfs: Dict[str, PdfEntity] = {}

    def save(self, pdf: PdfEntity) -> None:
        self._pdfs[pdf.id] = pdf

    def list_by_subject(self, subject_id: str) -> List[PdfEntity]:
        items = [p for p in self._pdfs.values() if p.subject_id == subject_id]
        return sorted(items, key=lambda p: p.created_at, reverse=True)

    def count(self) -> int:
        return len(self._pdfs)

    def clear(self) -> None:
        self._pdfs.clear()


class InMemoryVideoRepository:
    def __init__(self):
        self._videos: Dict[str, VideoEntity] = {}

    def save(self, video: VideoEntity) -> None:
        self._videos[video.id] = video

    def list_by_subject(self, subject_id: str) -> List[VideoEntity]:
        items = [v for v in self._videos.values() if v.subject_id == subject_id]
        return sorted(items, key=lambda v: v.created_at, reverse=True)

    def count(self) -> int:
        return len(self._videos)

    def clear(self) -> None:
        self._videos.clear()


class InMemoryContactRepository:
    def __init__(self):
        self._contacts: Dict[str, ContactMessageEntity] = {}

    def save(self, contact: ContactMessageEntity) -> None:
        self._contacts[contact.id] = contact

    def list_recent(self) -> List[ContactMessageEntity]:
        return sorted(self._contacts.values(), key=lambda c: c.created_at, reverse=True)

    def clear(self) -> None:
        self._contacts.clear()


class InMemoryFileStorage:
    """
    Storage em memória.

    Example:
        storage = InMemoryFileStorage()
        name = storage.upload("abc.pdf", uploaded_file)
        storage.public_url(name)  # "memory://pdfs/abc.pdf"
    """

    def __init__(self, bucket: str = "pdfs"):
        self.bucket = bucket
        self.files: Dict[str, bytes] = {}

    def upload(self, path: str, content) -> str:
        data = content.read() if hasattr(content, "read") else bytes(content)
        self.files[path] = data
        return path

    def public_url(self, path: str) -> str:
        return f"memory://{self.bucket}/{path}"

    def delete(self, path: str) -> None:
        self.files.pop(path, None)


class InMemoryAuthGateway:
    """
    AuthGateway em memória.

    Senhas ficam em texto puro: use apenas em testes.
    """

    def __init__(self):
        self._users: Dict[str, UserOutputDTO] = {}
        self._passwords: Dict[str, str] = {}

    def sign_up(self, email: str, password: str, full_name: str) -> UserOutputDTO:
        key = email.lower()
        if key in self._users:
            raise UpstreamRejectionError("User already registered", operation="sign_up")
        user = UserOutputDTO(id=str(uuid.uuid4()), email=email, full_name=full_name)
        self._users[key] = user
        self._passwords[key] = password
        return user

    def sign_in(self, email: str, password: str) -> UserOutputDTO:
        key = email.lower()
        if key not in self._users or self._passwords[key] != password:
            raise AuthenticationError()
        return self._users[key]

    def promote(self, email: str) -> UserOutputDTO:
        """Concede acesso de admin (fixtures de teste)."""
        key = email.lower()
        self._users[key] = replace(self._users[key], is_admin=True)
        return self._users[key]
