"""
AuthGateway - Implementação Django.

Cadastro e login sobre django.contrib.auth. O e-mail é o username;
o nome completo vai em first_name; is_staff dá acesso ao painel.
A sessão é aberta pela view com django.contrib.auth.login.
"""

import logging

from django.contrib.auth import authenticate, get_user_model
from django.db import IntegrityError, transaction

from src.core.portal.dtos import UserOutputDTO
from src.core.shared.exceptions import AuthenticationError, UpstreamRejectionError

logger = logging.getLogger(__name__)


def user_to_dto(user) -> UserOutputDTO:
    return UserOutputDTO(
        id=str(user.pk),
        email=user.email,
        full_name=user.first_name,
        is_admin=user.is_staff,
    )


class DjangoAuthGateway:
    """
    Implementação do Port AuthGateway com o User model do Django.

    Example:
        gateway = DjangoAuthGateway()
        user = gateway.sign_in("ada@example.com", "Passw0rd")
    """

    def sign_up(self, email: str, password: str, full_name: str) -> UserOutputDTO:
        """
        Raises:
            UpstreamRejectionError: E-mail já cadastrado
        """
        User = get_user_model()
        username = email.lower()

        if User.objects.filter(username=username).exists():
            raise UpstreamRejectionError("User already registered", operation="sign_up")

        try:
            with transaction.atomic():
                user = User.objects.create_user(
                    username=username,
                    email=email,
                    password=password,
                    first_name=full_name,
                )
        except IntegrityError as e:
            raise UpstreamRejectionError("User already registered", operation="sign_up") from e

        logger.info(f"Usuário criado: {user.pk}")
        return user_to_dto(user)

    def sign_in(self, email: str, password: str) -> UserOutputDTO:
        """
        Raises:
            AuthenticationError: Credenciais inválidas
        """
        user = authenticate(None, username=email.lower(), password=password)
        if user is None:
            logger.info("Login recusado")
            raise AuthenticationError("Invalid login credentials")
        return user_to_dto(user)
