"""
Regras de Validação Declarativas.

Cada campo de um formulário é descrito por uma lista ordenada de regras
`(predicado, mensagem)`. A validação de um campo segue sempre o mesmo
pipeline:

    presença/tipo → trim → tamanho → padrão → checagem de domínio

A primeira regra que falha fornece a mensagem do campo. Todos os campos
são avaliados, mesmo que outros já tenham falhado, para que o usuário
veja todos os problemas de uma vez.

Componentes:
- Rule: par predicado/mensagem
- Field: pipeline de um campo
- Schema: conjunto nomeado de campos → ValidationResult ou DTO

Example:
    schema = Schema("subject", fields=(
        Field("name", rules=(min_length(3, "Too short"),)),
    ))
    result = schema.validate({"name": "  Physics  "})
    result.ok       # True
    result.data     # {"name": "Physics"}
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional, Tuple
from urllib.parse import urlparse
import re

from src.core.shared.exceptions import FormValidationError


REQUIRED_MESSAGE = "Required"
EXPECTED_STRING_MESSAGE = "Expected string"

EMAIL_PATTERN = re.compile(
    r"^(?!\.)(?!.*\.\.)([A-Z0-9_'+\-\.]*)[A-Z0-9_+-]@([A-Z0-9][A-Z0-9\-]*\.)+[A-Z]{2,}$",
    re.IGNORECASE | re.ASCII,
)

UUID_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
    re.IGNORECASE,
)


# =============================================================================
# RULE
# =============================================================================

@dataclass(frozen=True)
class Rule:
    """
    Uma restrição de campo.

    Attributes:
        predicate: Função que retorna True quando o valor é aceito
        message: Mensagem legível quando o predicado falha
    """

    predicate: Callable[[Any], bool]
    message: str

    def check(self, value: Any) -> Optional[str]:
        """Retorna a mensagem de erro ou None se o valor passa."""
        return None if self.predicate(value) else self.message


def min_length(limit: int, message: str) -> Rule:
    return Rule(lambda value: len(value) >= limit, message)


def max_length(limit: int, message: str) -> Rule:
    return Rule(lambda value: len(value) <= limit, message)


def matches(pattern: str, message: str, flags: int = 0) -> Rule:
    """Valor inteiro precisa casar com o padrão (âncoras implícitas)."""
    compiled = re.compile(pattern, flags)
    return Rule(lambda value: compiled.fullmatch(value) is not None, message)


def contains(pattern: str, message: str, flags: int = 0) -> Rule:
    """Pelo menos um trecho do valor precisa casar com o padrão."""
    compiled = re.compile(pattern, flags)
    return Rule(lambda value: compiled.search(value) is not None, message)


def email(message: str) -> Rule:
    return Rule(lambda value: EMAIL_PATTERN.match(value) is not None, message)


def uuid(message: str) -> Rule:
    """Identificador canônico 8-4-4-4-12 em hexadecimal."""
    return Rule(lambda value: UUID_PATTERN.fullmatch(value) is not None, message)


def url(message: str) -> Rule:
    """URL bem formada: precisa de esquema e de host."""

    def _is_url(value: str) -> bool:
        try:
            parsed = urlparse(value)
        except ValueError:
            return False
        return bool(parsed.scheme) and bool(parsed.netloc)

    return Rule(_is_url, message)


def media_type(expected: str, message: str) -> Rule:
    """Arquivo cujo tipo declarado (content_type) é `expected`."""
    return Rule(
        lambda upload: getattr(upload, "content_type", None) == expected,
        message,
    )


def max_size(limit: int, message: str) -> Rule:
    """Arquivo com no máximo `limit` bytes."""

    def _fits(upload: Any) -> bool:
        size = getattr(upload, "size", None)
        return size is not None and size <= limit

    return Rule(_fits, message)


# =============================================================================
# FIELD
# =============================================================================

STRING = "string"
FILE = "file"


@dataclass(frozen=True)
class Field:
    """
    Pipeline de validação de um campo.

    Attributes:
        name: Nome do campo na entrada
        rules: Regras avaliadas em ordem (primeira falha vence)
        optional: Campo pode ser omitido; vazio vira None
        trim: Remove espaços antes das regras (senhas não são aparadas)
        kind: "string" ou "file"
        required_message: Mensagem quando o campo obrigatório está ausente
    """

    name: str
    rules: Tuple[Rule, ...] = ()
    optional: bool = False
    trim: bool = True
    kind: str = STRING
    required_message: str = REQUIRED_MESSAGE

    def clean(self, raw: Any) -> Tuple[Any, Optional[str]]:
        """
        Aplica o pipeline ao valor bruto.

        Returns:
            (valor normalizado, None) se aceito;
            (None, mensagem) se rejeitado
        """
        if raw is None:
            if self.optional:
                return None, None
            return None, self.required_message

        if self.kind == FILE:
            return self._run_rules(raw)

        if not isinstance(raw, str):
            return None, EXPECTED_STRING_MESSAGE

        value = raw.strip() if self.trim else raw

        if self.optional and not value.strip():
            return None, None

        return self._run_rules(value)

    def _run_rules(self, value: Any) -> Tuple[Any, Optional[str]]:
        for rule in self.rules:
            error = rule.check(value)
            if error is not None:
                return None, error
        return value, None


# =============================================================================
# SCHEMA
# =============================================================================

@dataclass(frozen=True)
class ValidationResult:
    """
    Resultado da validação de uma entrada.

    Attributes:
        data: Dados normalizados (vazio se houve erro)
        errors: Mapa campo → mensagem (vazio se aceito)
    """

    data: Dict[str, Any] = field(default_factory=dict)
    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors


@dataclass(frozen=True)
class Schema:
    """
    Conjunto nomeado de campos aplicado a um formato de entrada.

    Função pura: não altera o mapeamento recebido e não tem efeitos
    colaterais. Não há sucesso parcial.

    Attributes:
        name: Nome do schema (para logs e mensagens)
        fields: Campos avaliados
        output: Fábrica do DTO de entrada (recebe os dados normalizados
            como kwargs); usada por `parse`
    """

    name: str
    fields: Tuple[Field, ...]
    output: Optional[Callable[..., Any]] = None

    @property
    def field_names(self) -> Tuple[str, ...]:
        return tuple(f.name for f in self.fields)

    def validate(self, data: Mapping[str, Any]) -> ValidationResult:
        """
        Valida a entrada sem lançar exceções.

        Args:
            data: Mapeamento com os campos do schema (campos extras
                são ignorados)

        Returns:
            ValidationResult com dados normalizados ou erros por campo
        """
        cleaned: Dict[str, Any] = {}
        errors: Dict[str, str] = {}

        for schema_field in self.fields:
            value, error = schema_field.clean(data.get(schema_field.name))
            if error is not None:
                errors[schema_field.name] = error
            else:
                cleaned[schema_field.name] = value

        if errors:
            return ValidationResult(errors=errors)
        return ValidationResult(data=cleaned)

    def parse(self, data: Mapping[str, Any]) -> Any:
        """
        Valida e constrói o DTO de entrada.

        Raises:
            FormValidationError: Se algum campo for rejeitado
        """
        result = self.validate(data)
        if not result.ok:
            raise FormValidationError(result.errors)
        if self.output is None:
            return result.data
        return self.output(**result.data)
