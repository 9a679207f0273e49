"""
Exceções de Domínio do Study Portal.

Este módulo define exceções específicas do domínio que permitem
comunicar erros de forma clara e tipada entre as camadas.

Hierarquia:
    DomainException (base)
    ├── ValidationError (violação de um único campo)
    │   └── FormValidationError (mapa campo → mensagem de um formulário)
    ├── EntityNotFoundError (registro referenciado não existe)
    ├── AuthenticationError (credenciais recusadas)
    └── UpstreamRejectionError (store externo recusou a escrita)
"""

from typing import Dict, Optional


class DomainException(Exception):
    """
    Exceção base para todos os erros de domínio.

    Permite capturar qualquer erro de domínio de forma genérica
    nas views, sem conhecer o tipo concreto.

    Example:
        try:
            service.execute(data)
        except DomainException as e:
            logger.error(f"Erro de domínio: {e}")
    """

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict:
        """Serializa exceção para dicionário (útil para APIs)."""
        return {
            "error": self.code,
            "message": self.message,
        }


class ValidationError(DomainException):
    """
    Violação de uma regra de um único campo.

    Example:
        raise ValidationError("Invalid YouTube URL", field="youtube_url")
    """

    def __init__(self, message: str, field: str = None):
        self.field = field
        code = f"VALIDATION_ERROR_{field.upper()}" if field else "VALIDATION_ERROR"
        super().__init__(message, code)

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.field:
            result["field"] = self.field
        return result


class FormValidationError(ValidationError):
    """
    Rejeição de uma entrada inteira.

    Carrega uma mensagem por campo inválido (a primeira regra que
    falhou naquele campo). Nunca há sucesso parcial: se algum campo
    falhou, a entrada toda é rejeitada.

    Attributes:
        errors: Mapa nome do campo → mensagem legível

    Example:
        raise FormValidationError({
            "email": "Invalid email address",
            "message": "Message must be at least 10 characters",
        })
    """

    DEFAULT_MESSAGE = "Please check the form for errors"

    def __init__(self, errors: Dict[str, str], message: Optional[str] = None):
        self.errors = dict(errors)
        super().__init__(message or self.DEFAULT_MESSAGE)
        self.code = "FORM_VALIDATION_ERROR"

    @classmethod
    def for_field(cls, field: str, message: str) -> "FormValidationError":
        """Atalho para rejeição com um único campo."""
        return cls({field: message})

    def to_dict(self) -> dict:
        result = super().to_dict()
        result["errors"] = dict(self.errors)
        return result


class EntityNotFoundError(DomainException):
    """
    Registro não encontrado no store externo.

    Example:
        subject = repo.get_by_id(subject_id)
        if not subject:
            raise EntityNotFoundError(f"Subject {subject_id} not found")
    """

    def __init__(self, message: str, entity_type: str = None, entity_id: str = None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(message, "ENTITY_NOT_FOUND")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.entity_type:
            result["entity_type"] = self.entity_type
        if self.entity_id:
            result["entity_id"] = self.entity_id
        return result


class AuthenticationError(DomainException):
    """Credenciais recusadas pelo colaborador de autenticação."""

    def __init__(self, message: str = "Invalid login credentials"):
        super().__init__(message, "AUTHENTICATION_FAILED")


class UpstreamRejectionError(DomainException):
    """
    O store externo recusou a operação.

    A mensagem é opaca: é repassada ao usuário como notificação
    transitória, sem retry.

    Example:
        except IntegrityError as e:
            raise UpstreamRejectionError("Subject already exists") from e
    """

    def __init__(self, message: str, operation: str = None):
        self.operation = operation
        super().__init__(message, "UPSTREAM_REJECTED")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.operation:
            result["operation"] = self.operation
        return result
