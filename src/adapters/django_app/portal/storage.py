"""
FileStorage - Implementação Django.

Grava os PDFs no storage configurado em STORAGES["default"]
(FileSystemStorage em MEDIA_ROOT por padrão) dentro de PDF_UPLOAD_DIR.
"""

from typing import Optional
import logging
import posixpath

from django.core.files.storage import Storage, default_storage

from src.core.shared.exceptions import UpstreamRejectionError

logger = logging.getLogger(__name__)


class DjangoFileStorage:
    """
    Implementação do Port FileStorage sobre o Storage do Django.

    Example:
        storage = DjangoFileStorage(upload_dir="pdfs")
        name = storage.upload("3f2a....pdf", request.FILES["file"])
        storage.public_url(name)  # "/media/pdfs/3f2a....pdf"
    """

    def __init__(self, upload_dir: str = "pdfs", storage: Optional[Storage] = None):
        self.upload_dir = upload_dir
        self._storage = storage or default_storage

    def upload(self, path: str, content) -> str:
        """
        Returns:
            Nome efetivo gravado (o storage pode renomear em colisão)

        Raises:
            UpstreamRejectionError: Se o storage recusar a gravação
        """
        target = posixpath.join(self.upload_dir, path)
        try:
            name = self._storage.save(target, content)
        except OSError as e:
            logger.error(f"Falha ao gravar {target}: {e}", exc_info=True)
            raise UpstreamRejectionError("Could not store the file", operation="upload") from e
        logger.info(f"Arquivo gravado: {name}")
        return name

    def public_url(self, path: str) -> str:
        return self._storage.url(path)

    def delete(self, path: str) -> None:
        self._storage.delete(path)
