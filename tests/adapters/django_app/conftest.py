"""
Fixtures dos testes com Django (banco SQLite de teste do pytest-django).

- Container DI recriado a cada teste
- Storage de arquivos em memória (nenhum arquivo em MEDIA_ROOT)
- Usuários comum e admin prontos para login
"""

import pytest
from dependency_injector import providers
from django.core.files.uploadedfile import SimpleUploadedFile

from src.config.container import get_container, reset_container
from src.core.portal.ports import InMemoryFileStorage


PASSWORD = "Passw0rd"


@pytest.fixture(autouse=True)
def reset_di_container():
    """Reset container entre testes."""
    reset_container()
    yield
    reset_container()


@pytest.fixture
def container():
    return get_container()


@pytest.fixture
def memory_storage(container):
    storage = InMemoryFileStorage()
    container.file_storage.override(providers.Object(storage))
    yield storage
    container.file_storage.reset_override()


@pytest.fixture
def user(django_user_model):
    return django_user_model.objects.create_user(
        username="student@example.com",
        email="student@example.com",
        password=PASSWORD,
        first_name="Student",
    )


@pytest.fixture
def admin_user(django_user_model):
    return django_user_model.objects.create_user(
        username="admin@example.com",
        email="admin@example.com",
        password=PASSWORD,
        first_name="Admin",
        is_staff=True,
    )


@pytest.fixture
def student_client(client, user):
    client.force_login(user)
    return client


@pytest.fixture
def admin_client(client, admin_user):
    client.force_login(admin_user)
    return client


@pytest.fixture
def subject(container, db):
    """Matéria criada pelo use case."""
    return container.create_subject_service().execute({
        "name": "Physics",
        "description": "Mechanics and waves",
    })


@pytest.fixture
def pdf_file():
    def make(name="notes.pdf", content=b"%PDF-1.4 test", content_type="application/pdf"):
        return SimpleUploadedFile(name, content, content_type=content_type)
    return make
