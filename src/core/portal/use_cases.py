"""
Use Cases (Application Services) do Portal.

Um service por ação de formulário e um por consulta das páginas:

Escrita (validam antes de qualquer chamada ao store externo):
- SubmitContactService: formulário de contato
- SignUpService / SignInService: autenticação
- CreateSubjectService: nova matéria
- UploadPdfService: envio de PDF
- AddVideoService: vínculo de vídeo do YouTube

Leitura:
- ListSubjectsService: matérias por nome, com busca
- GetSubjectService: matéria por ID
- ListPdfsService / ListVideosService: conteúdo de uma matéria
- ListContactsService: mensagens de contato
- DashboardStatsService: totais do painel

Princípios:
- Um Use Case = uma operação
- Dependências injetadas (DI)
- Nenhuma escrita parcial: validação falha → nada é persistido
"""

from typing import Any, List, Mapping, Optional
import logging
import uuid

from src.core.shared.exceptions import EntityNotFoundError, FormValidationError
from src.core.shared.interfaces import UnitOfWork
from src.core.validation.youtube import extract_youtube_video_id

from .dtos import (
    ContactMessageOutputDTO,
    DashboardStatsDTO,
    PdfOutputDTO,
    SubjectOutputDTO,
    UserOutputDTO,
    VideoOutputDTO,
)
from .entities import ContactMessageEntity, PdfEntity, SubjectEntity, VideoEntity
from .events import (
    ContactMessageReceivedEvent,
    PdfUploadedEvent,
    SubjectCreatedEvent,
    VideoAddedEvent,
)
from .ports import (
    AuthGateway,
    ContactRepository,
    FileStorage,
    PdfRepository,
    SubjectRepository,
    VideoRepository,
)
from .schemas import (
    contact_schema,
    pdf_schema,
    sign_in_schema,
    sign_up_schema,
    subject_schema,
    video_schema,
)


logger = logging.getLogger(__name__)

INVALID_SUBJECT_MESSAGE = "Invalid subject selected"
INVALID_YOUTUBE_URL_MESSAGE = "Invalid YouTube URL"


def filter_subjects(subjects: List[SubjectEntity], query: Optional[str]) -> List[SubjectEntity]:
    """Busca por substring do nome, sem diferenciar maiúsculas."""
    query = (query or "").strip()
    return [s for s in subjects if s.matches(query)]


# =============================================================================
# ESCRITA
# =============================================================================

class SubmitContactService:
    """
    Use Case: enviar mensagem de contato.

    Fluxo:
    1. Validar com contact_schema
    2. Persistir mensagem
    3. Disparar ContactMessageReceivedEvent (após commit)

    Example:
        service = SubmitContactService(contact_repo, uow)
        output = service.execute({
            "name": "Ada Lovelace",
            "email": "ada@example.com",
            "message": "Could you add more algebra?",
        })
    """

    def __init__(self, contact_repo: ContactRepository, uow: UnitOfWork):
        self.contact_repo = contact_repo
        self.uow = uow

    def execute(self, data: Mapping[str, Any]) -> ContactMessageOutputDTO:
        """
        Args:
            data: Campos brutos do formulário

        Returns:
            DTO da mensagem gravada

        Raises:
            FormValidationError: Se algum campo for rejeitado
        """
        input_dto = contact_schema.parse(data)

        with self.uow:
            contact = ContactMessageEntity.create(
                name=input_dto.name,
                email=input_dto.email,
                message=input_dto.message,
            )
            self.contact_repo.save(contact)

            self.uow.publish_event(
                ContactMessageReceivedEvent(
                    aggregate_id=contact.id,
                    name=contact.name,
                    email=contact.email,
                    message_preview=ContactMessageReceivedEvent.preview(contact.message),
                )
            )

        logger.info(f"Mensagem de contato {contact.id} recebida de {contact.email}")
        return ContactMessageOutputDTO.from_entity(contact)


class SignUpService:
    """
    Use Case: cadastro de usuário.

    A conta é criada pelo AuthGateway; e-mail já cadastrado vira
    UpstreamRejectionError.
    """

    def __init__(self, auth_gateway: AuthGateway):
        self.auth_gateway = auth_gateway

    def execute(self, data: Mapping[str, Any]) -> UserOutputDTO:
        input_dto = sign_up_schema.parse(data)
        user = self.auth_gateway.sign_up(
            email=input_dto.email,
            password=input_dto.password,
            full_name=input_dto.full_name,
        )
        logger.info(f"Usuário {user.id} cadastrado")
        return user


class SignInService:
    """
    Use Case: login.

    Raises:
        FormValidationError: Campos inválidos
        AuthenticationError: Credenciais recusadas
    """

    def __init__(self, auth_gateway: AuthGateway):
        self.auth_gateway = auth_gateway

    def execute(self, data: Mapping[str, Any]) -> UserOutputDTO:
        input_dto = sign_in_schema.parse(data)
        return self.auth_gateway.sign_in(email=input_dto.email, password=input_dto.password)


class CreateSubjectService:
    """Use Case: admin cria uma matéria."""

    def __init__(self, subject_repo: SubjectRepository, uow: UnitOfWork):
        self.subject_repo = subject_repo
        self.uow = uow

    def execute(self, data: Mapping[str, Any]) -> SubjectOutputDTO:
        """
        Raises:
            FormValidationError: Campos inválidos
            UpstreamRejectionError: Nome de matéria já existe
        """
        input_dto = subject_schema.parse(data)

        with self.uow:
            subject = SubjectEntity.create(
                name=input_dto.name,
                description=input_dto.description,
            )
            self.subject_repo.save(subject)
            self.uow.publish_event(
                SubjectCreatedEvent(aggregate_id=subject.id, name=subject.name)
            )

        logger.info(f"Matéria {subject.id} criada: {subject.name}")
        return SubjectOutputDTO.from_entity(subject)


class UploadPdfService:
    """
    Use Case: admin envia um PDF.

    Fluxo:
    1. Validar com pdf_schema (tipo e tamanho do arquivo inclusos)
    2. Confirmar que a matéria existe
    3. Gravar o arquivo como `<uuid>.<ext>` no storage
    4. Persistir o registro com URL pública e tamanho
    5. Disparar PdfUploadedEvent

    Se o registro não puder ser salvo, o arquivo gravado é removido.
    """

    def __init__(
        self,
        subject_repo: SubjectRepository,
        pdf_repo: PdfRepository,
        file_storage: FileStorage,
        uow: UnitOfWork,
    ):
        self.subject_repo = subject_repo
        self.pdf_repo = pdf_repo
        self.file_storage = file_storage
        self.uow = uow

    def execute(self, data: Mapping[str, Any], uploaded_by: Optional[str] = None) -> PdfOutputDTO:
        """
        Args:
            data: Campos do formulário (`file` é o arquivo enviado)
            uploaded_by: ID do admin

        Raises:
            FormValidationError: Campos inválidos ou matéria inexistente
            UpstreamRejectionError: Storage ou banco recusaram a escrita
        """
        input_dto = pdf_schema.parse(data)

        if not self.subject_repo.exists(input_dto.subject_id):
            raise FormValidationError.for_field("subject_id", INVALID_SUBJECT_MESSAGE)

        file_name = f"{uuid.uuid4().hex}.{input_dto.extension}"
        stored_name = self.file_storage.upload(file_name, input_dto.file)

        try:
            with self.uow:
                pdf = PdfEntity.create(
                    subject_id=input_dto.subject_id,
                    title=input_dto.title,
                    description=input_dto.description,
                    file_path=stored_name,
                    file_url=self.file_storage.public_url(stored_name),
                    file_size=input_dto.file.size,
                    uploaded_by=uploaded_by,
                )
                self.pdf_repo.save(pdf)
                self.uow.publish_event(
                    PdfUploadedEvent(
                        aggregate_id=pdf.id,
                        subject_id=pdf.subject_id,
                        title=pdf.title,
                        file_size=pdf.file_size,
                        uploaded_by=uploaded_by,
                    )
                )
        except Exception:
            logger.warning(f"Registro do PDF não salvo; removendo arquivo {stored_name}")
            self.file_storage.delete(stored_name)
            raise

        logger.info(f"PDF {pdf.id} enviado para a matéria {pdf.subject_id}")
        return PdfOutputDTO.from_entity(pdf)


class AddVideoService:
    """
    Use Case: admin vincula um vídeo do YouTube.

    O ID de 11 caracteres é extraído da URL validada; se não for
    encontrado, a entrada é rejeitada no campo youtube_url.
    """

    def __init__(
        self,
        subject_repo: SubjectRepository,
        video_repo: VideoRepository,
        uow: UnitOfWork,
    ):
        self.subject_repo = subject_repo
        self.video_repo = video_repo
        self.uow = uow

    def execute(self, data: Mapping[str, Any], added_by: Optional[str] = None) -> VideoOutputDTO:
        """
        Raises:
            FormValidationError: Campos inválidos, URL sem ID ou matéria inexistente
        """
        input_dto = video_schema.parse(data)

        # O schema já rejeita URLs sem ID; a guarda cobre divergência entre
        # a regra do schema e o extrator.
        video_id = extract_youtube_video_id(input_dto.youtube_url)
        if video_id is None:
            raise FormValidationError.for_field("youtube_url", INVALID_YOUTUBE_URL_MESSAGE)

        if not self.subject_repo.exists(input_dto.subject_id):
            raise FormValidationError.for_field("subject_id", INVALID_SUBJECT_MESSAGE)

        with self.uow:
            video = VideoEntity.create(
                subject_id=input_dto.subject_id,
                title=input_dto.title,
                description=input_dto.description,
                youtube_url=input_dto.youtube_url,
                video_id=video_id,
                added_by=added_by,
            )
            self.video_repo.save(video)
            self.uow.publish_event(
                VideoAddedEvent(
                    aggregate_id=video.id,
                    subject_id=video.subject_id,
                    title=video.title,
                    video_id=video.video_id,
                    added_by=added_by,
                )
            )

        logger.info(f"Vídeo {video.video_id} adicionado à matéria {video.subject_id}")
        return VideoOutputDTO.from_entity(video)


# =============================================================================
# LEITURA
# =============================================================================

class ListSubjectsService:
    """
    Use Case: listar matérias.

    Ordenadas por nome; `query` filtra por substring do nome
    sem diferenciar maiúsculas.
    """

    def __init__(self, subject_repo: SubjectRepository):
        self.subject_repo = subject_repo

    def execute(self, query: Optional[str] = None) -> List[SubjectOutputDTO]:
        subjects = filter_subjects(self.subject_repo.list_all(), query)
        return [SubjectOutputDTO.from_entity(s) for s in subjects]


class GetSubjectService:
    def __init__(self, subject_repo: SubjectRepository):
        self.subject_repo = subject_repo

    def execute(self, subject_id: str) -> SubjectOutputDTO:
        """
        Raises:
            EntityNotFoundError: Se a matéria não existe
        """
        subject = self.subject_repo.get_by_id(subject_id)
        if not subject:
            raise EntityNotFoundError(
                f"Subject {subject_id} not found",
                entity_type="Subject",
                entity_id=subject_id,
            )
        return SubjectOutputDTO.from_entity(subject)


class ListPdfsService:
    def __init__(self, pdf_repo: PdfRepository):
        self.pdf_repo = pdf_repo

    def execute(self, subject_id: str) -> List[PdfOutputDTO]:
        return [PdfOutputDTO.from_entity(p) for p in self.pdf_repo.list_by_subject(subject_id)]


class ListVideosService:
    def __init__(self, video_repo: VideoRepository):
        self.video_repo = video_repo

    def execute(self, subject_id: str) -> List[VideoOutputDTO]:
        return [
            VideoOutputDTO.from_entity(v)
            for v in self.video_repo.list_by_subject(subject_id)
        ]


class ListContactsService:
    def __init__(self, contact_repo: ContactRepository):
        self.contact_repo = contact_repo

    def execute(self) -> List[ContactMessageOutputDTO]:
        return [
            ContactMessageOutputDTO.from_entity(c)
            for c in self.contact_repo.list_recent()
        ]


class DashboardStatsService:
    def __init__(self, pdf_repo: PdfRepository, video_repo: VideoRepository):
        self.pdf_repo = pdf_repo
        self.video_repo = video_repo

    def execute(self) -> DashboardStatsDTO:
        return DashboardStatsDTO(
            pdf_count=self.pdf_repo.count(),
            video_count=self.video_repo.count(),
        )
