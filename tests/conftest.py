"""
Configurações globais do Pytest para o Study Portal.

Django é configurado pelo pytest-django (DJANGO_SETTINGS_MODULE no
pyproject.toml). Este arquivo fornece fixtures compartilhadas pelos
testes do Core (sem banco) e dos adapters.
"""

from pathlib import Path

import pytest


class FakeUpload:
    """
    Arquivo enviado, no formato que o Core espera
    (name, content_type, size e read()).
    """

    def __init__(self, name="notes.pdf", content=b"%PDF-1.4 test", content_type="application/pdf", size=None):
        self.name = name
        self.content = content
        self.content_type = content_type
        self.size = len(content) if size is None else size

    def read(self):
        return self.content


@pytest.fixture(scope="session")
def project_root():
    """Retorna o caminho raiz do projeto."""
    return Path(__file__).parent.parent


@pytest.fixture
def pdf_upload():
    """Fábrica de uploads falsos."""
    return FakeUpload


@pytest.fixture(autouse=True)
def fast_password_hasher(settings):
    """Hash MD5 nos testes (cadastro/login ficam rápidos)."""
    settings.PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]
