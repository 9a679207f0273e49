"""
Testes dos adapters de persistência: repositórios, mappers,
auth gateway e storage de arquivos.
"""

from datetime import timedelta

import pytest
from django.core.files.base import ContentFile
from django.core.files.storage import FileSystemStorage

from src.adapters.django_app.portal.auth import DjangoAuthGateway
from src.adapters.django_app.portal.mappers import SubjectMapper
from src.adapters.django_app.portal.models import SubjectModel
from src.adapters.django_app.portal.repositories import (
    DjangoContactRepository,
    DjangoPdfRepository,
    DjangoSubjectRepository,
    DjangoVideoRepository,
)
from src.adapters.django_app.portal.storage import DjangoFileStorage
from src.core.portal.entities import (
    ContactMessageEntity,
    PdfEntity,
    SubjectEntity,
    VideoEntity,
)
from src.core.portal.ports import (
    AuthGateway,
    ContactRepository,
    FileStorage,
    PdfRepository,
    SubjectRepository,
    VideoRepository,
)
from src.core.shared.exceptions import AuthenticationError, UpstreamRejectionError


pytestmark = pytest.mark.django_db


@pytest.fixture
def subject_repo():
    return DjangoSubjectRepository()


@pytest.fixture
def physics(subject_repo):
    subject = SubjectEntity.create("Physics", "Mechanics")
    subject_repo.save(subject)
    return subject


class TestPortImplementations:

    def test_adapters_satisfazem_os_ports(self):
        assert isinstance(DjangoSubjectRepository(), SubjectRepository)
        assert isinstance(DjangoPdfRepository(), PdfRepository)
        assert isinstance(DjangoVideoRepository(), VideoRepository)
        assert isinstance(DjangoContactRepository(), ContactRepository)
        assert isinstance(DjangoFileStorage(), FileStorage)
        assert isinstance(DjangoAuthGateway(), AuthGateway)


class TestSubjectRepository:

    def test_save_e_get_by_id(self, subject_repo, physics):
        loaded = subject_repo.get_by_id(physics.id)

        assert loaded.name == "Physics"
        assert loaded.description == "Mechanics"
        assert subject_repo.exists(physics.id)

    def test_inexistente(self, subject_repo):
        assert subject_repo.get_by_id("00000000-0000-4000-8000-000000000000") is None
        assert not subject_repo.exists("00000000-0000-4000-8000-000000000000")

    def test_nome_duplicado(self, subject_repo, physics):
        with pytest.raises(UpstreamRejectionError) as exc_info:
            subject_repo.save(SubjectEntity.create("Physics"))

        assert exc_info.value.message == 'Subject "Physics" already exists'
        assert SubjectModel.objects.count() == 1

    def test_list_all_ordenado(self, subject_repo):
        for name in ("Physics", "Biology", "Mathematics"):
            subject_repo.save(SubjectEntity.create(name))

        assert [s.name for s in subject_repo.list_all()] == ["Biology", "Mathematics", "Physics"]

    def test_mapper_ida_e_volta(self, physics):
        model = SubjectModel.objects.get(id=physics.id)
        entity = SubjectMapper.to_entity(model)

        assert entity.id == physics.id
        assert SubjectMapper.to_model(entity).name == "Physics"


class TestContentRepositories:

    def test_pdfs_mais_recentes_primeiro(self, physics):
        repo = DjangoPdfRepository()
        older = PdfEntity.create(physics.id, "Older handout", "pdfs/a.pdf", "/media/pdfs/a.pdf", 10)
        older.created_at -= timedelta(days=1)
        newer = PdfEntity.create(physics.id, "Newer handout", "pdfs/b.pdf", "/media/pdfs/b.pdf", 20)
        repo.save(older)
        repo.save(newer)

        assert [p.title for p in repo.list_by_subject(physics.id)] == ["Newer handout", "Older handout"]
        assert repo.count() == 2

    def test_videos_por_materia(self, subject_repo, physics):
        other = SubjectEntity.create("Chemistry")
        subject_repo.save(other)
        repo = DjangoVideoRepository()
        repo.save(VideoEntity.create(physics.id, "Intro lecture", "https://youtu.be/dQw4w9WgXcQ", "dQw4w9WgXcQ"))
        repo.save(VideoEntity.create(other.id, "Atoms lecture", "https://youtu.be/aaaaaaaaaaa", "aaaaaaaaaaa"))

        [video] = repo.list_by_subject(physics.id)

        assert video.video_id == "dQw4w9WgXcQ"
        assert video.embed_url == "https://www.youtube.com/embed/dQw4w9WgXcQ"
        assert repo.count() == 2

    def test_contatos(self):
        repo = DjangoContactRepository()
        repo.save(ContactMessageEntity.create("Ada", "ada@example.com", "Hello there, team!"))

        [contact] = repo.list_recent()
        assert contact.email == "ada@example.com"


class TestDjangoAuthGateway:

    def test_cadastro_e_login(self):
        gateway = DjangoAuthGateway()
        created = gateway.sign_up("Ada@Example.com", "Passw0rd", "Ada Lovelace")

        user = gateway.sign_in("ada@example.com", "Passw0rd")

        assert user.id == created.id
        assert user.full_name == "Ada Lovelace"
        assert user.is_admin is False

    def test_cadastro_duplicado(self):
        gateway = DjangoAuthGateway()
        gateway.sign_up("ada@example.com", "Passw0rd", "Ada")

        with pytest.raises(UpstreamRejectionError, match="User already registered"):
            gateway.sign_up("ADA@example.com", "Passw0rd", "Ada")

    def test_login_invalido(self):
        with pytest.raises(AuthenticationError):
            DjangoAuthGateway().sign_in("nobody@example.com", "Passw0rd")


class TestDjangoFileStorage:

    def test_upload_url_e_delete(self, tmp_path):
        storage = DjangoFileStorage(
            upload_dir="pdfs",
            storage=FileSystemStorage(location=tmp_path, base_url="/media/"),
        )

        name = storage.upload("abc.pdf", ContentFile(b"%PDF-1.4"))

        assert name == "pdfs/abc.pdf"
        assert (tmp_path / "pdfs" / "abc.pdf").read_bytes() == b"%PDF-1.4"
        assert storage.public_url(name) == "/media/pdfs/abc.pdf"

        storage.delete(name)
        assert not (tmp_path / "pdfs" / "abc.pdf").exists()
