"""
Extração do identificador de vídeos do YouTube.

Reconhece as formas usuais de link:
    https://www.youtube.com/watch?v=<id>
    https://www.youtube.com/embed/<id>
    https://www.youtube.com/v/<id>
    https://youtu.be/<id>

O identificador são os 11 caracteres seguintes ao prefixo, nenhum
deles `"`, `&`, `?`, `/` ou espaço. A busca não é ancorada e
diferencia maiúsculas.
"""

from typing import Any, Optional
import re


YOUTUBE_ID_PATTERN = re.compile(
    r"(?:youtube\.com/(?:[^/]+/.+/|(?:v|e(?:mbed)?)/|.*[?&]v=)|youtu\.be/)"
    r"([^\"&?/\s]{11})"
)

EMBED_URL = "https://www.youtube.com/embed/{video_id}"
WATCH_URL = "https://www.youtube.com/watch?v={video_id}"
THUMBNAIL_URL = "https://img.youtube.com/vi/{video_id}/hqdefault.jpg"


def extract_youtube_video_id(url: Any) -> Optional[str]:
    """
    Extrai o ID de 11 caracteres de uma URL do YouTube.

    Ausência não é erro: quem chama converte None em violação
    do campo youtube_url.

    Args:
        url: Qualquer valor (não-string retorna None)

    Returns:
        ID do vídeo ou None se a URL não for reconhecida

    Example:
        >>> extract_youtube_video_id("https://youtu.be/dQw4w9WgXcQ")
        'dQw4w9WgXcQ'
    """
    if not isinstance(url, str):
        return None
    match = YOUTUBE_ID_PATTERN.search(url)
    return match.group(1) if match else None


def is_youtube_url(url: Any) -> bool:
    return extract_youtube_video_id(url) is not None


def build_embed_url(video_id: str) -> str:
    return EMBED_URL.format(video_id=video_id)


def build_watch_url(video_id: str) -> str:
    return WATCH_URL.format(video_id=video_id)


def build_thumbnail_url(video_id: str) -> str:
    return THUMBNAIL_URL.format(video_id=video_id)
