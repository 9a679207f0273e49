"""
Dependency Injection Container.

Configura e gerencia as dependências do portal com dependency-injector.

Padrões:
- Singleton: uma instância para toda a app (repositórios, gateways)
- Factory: nova instância por chamada (services, UoW)
- Configuration: valores vindos do settings do Django

Testes substituem providers com `override`:

    container = get_container()
    container.file_storage.override(providers.Singleton(InMemoryFileStorage))
"""

from typing import Optional

from dependency_injector import containers, providers

from src.adapters.django_app.events.publishers import get_event_publisher
from src.adapters.django_app.portal.auth import DjangoAuthGateway
from src.adapters.django_app.portal.repositories import (
    DjangoContactRepository,
    DjangoPdfRepository,
    DjangoSubjectRepository,
    DjangoVideoRepository,
)
from src.adapters.django_app.portal.storage import DjangoFileStorage
from src.adapters.django_app.shared.unit_of_work import DjangoUnitOfWork
from src.core.portal import use_cases


class Container(containers.DeclarativeContainer):
    """
    Container principal de Dependency Injection.

    Organização:
    - Configuration: settings do Django
    - Infrastructure: publisher, storage, autenticação
    - Repositories: persistência
    - Unit of Work: transações
    - Services: Use Cases

    Example:
        container = get_container()
        service = container.create_subject_service()
        output = service.execute({"name": "Physics"})
    """

    # =========================================================================
    # Configuration
    # =========================================================================

    config = providers.Configuration()

    # =========================================================================
    # Infrastructure
    # =========================================================================

    event_publisher = providers.Singleton(
        get_event_publisher,
        mode=config.event_publisher_mode,
    )

    file_storage = providers.Singleton(
        DjangoFileStorage,
        upload_dir=config.pdf_upload_dir,
    )

    auth_gateway = providers.Singleton(DjangoAuthGateway)

    # =========================================================================
    # Repositories (Singleton)
    # =========================================================================

    subject_repository = providers.Singleton(DjangoSubjectRepository)
    pdf_repository = providers.Singleton(DjangoPdfRepository)
    video_repository = providers.Singleton(DjangoVideoRepository)
    contact_repository = providers.Singleton(DjangoContactRepository)

    # =========================================================================
    # Unit of Work (Factory - nova instância por operação)
    # =========================================================================

    unit_of_work = providers.Factory(
        DjangoUnitOfWork,
        event_publisher=event_publisher,
    )

    # =========================================================================
    # Services / Use Cases - Escrita
    # =========================================================================

    submit_contact_service = providers.Factory(
        use_cases.SubmitContactService,
        contact_repo=contact_repository,
        uow=unit_of_work,
    )

    sign_up_service = providers.Factory(
        use_cases.SignUpService,
        auth_gateway=auth_gateway,
    )

    sign_in_service = providers.Factory(
        use_cases.SignInService,
        auth_gateway=auth_gateway,
    )

    create_subject_service = providers.Factory(
        use_cases.CreateSubjectService,
        subject_repo=subject_repository,
        uow=unit_of_work,
    )

    upload_pdf_service = providers.Factory(
        use_cases.UploadPdfService,
        subject_repo=subject_repository,
        pdf_repo=pdf_repository,
        file_storage=file_storage,
        uow=unit_of_work,
    )

    add_video_service = providers.Factory(
        use_cases.AddVideoService,
        subject_repo=subject_repository,
        video_repo=video_repository,
        uow=unit_of_work,
    )

    # =========================================================================
    # Services / Use Cases - Leitura (sem UoW)
    # =========================================================================

    list_subjects_service = providers.Factory(
        use_cases.ListSubjectsService,
        subject_repo=subject_repository,
    )

    get_subject_service = providers.Factory(
        use_cases.GetSubjectService,
        subject_repo=subject_repository,
    )

    list_pdfs_service = providers.Factory(
        use_cases.ListPdfsService,
        pdf_repo=pdf_repository,
    )

    list_videos_service = providers.Factory(
        use_cases.ListVideosService,
        video_repo=video_repository,
    )

    list_contacts_service = providers.Factory(
        use_cases.ListContactsService,
        contact_repo=contact_repository,
    )

    dashboard_stats_service = providers.Factory(
        use_cases.DashboardStatsService,
        pdf_repo=pdf_repository,
        video_repo=video_repository,
    )


# =============================================================================
# Container Global (Singleton)
# =============================================================================

_container: Optional[Container] = None


def _config_from_settings() -> dict:
    from django.conf import settings

    return {
        "event_publisher_mode": getattr(settings, "EVENT_PUBLISHER_MODE", "sync"),
        "pdf_upload_dir": getattr(settings, "PDF_UPLOAD_DIR", "pdfs"),
    }


def get_container() -> Container:
    """
    Retorna instância global do container.

    Cria se não existir (lazy initialization), lendo a configuração
    do settings do Django.
    """
    global _container

    if _container is None:
        _container = Container()
        _container.config.from_dict(_config_from_settings())

    return _container


def reset_container() -> None:
    """
    Reset do container (para testes).

    Permite criar novo container limpo.
    """
    global _container
    _container = None
