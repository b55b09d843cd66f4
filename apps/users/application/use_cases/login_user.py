"""
Login user use case.
"""
import logging
from dataclasses import dataclass

from shared.application import UseCase, UseCaseResult
from ...domain.exceptions import InvalidCredentialsError, InvalidProfileDataError
from ...domain.repositories.auth_gateway import AuthGateway
from ...interfaces.serializers.auth_serializer import LoginResultSerializer
from ..dtos.auth_dto import AuthenticatedDTO, LoginDTO
from ..session import StoreSession

logger = logging.getLogger(__name__)


@dataclass
class LoginUserUseCase(UseCase[LoginDTO, AuthenticatedDTO]):
    """Exchanges a username and password for a token and starts the session."""

    auth_gateway: AuthGateway
    session: StoreSession

    def execute(self, input_dto: LoginDTO) -> UseCaseResult[AuthenticatedDTO]:
        if not input_dto.username.strip() or not input_dto.password:
            raise InvalidCredentialsError("Please enter your username and password.")

        result = LoginResultSerializer(data=self.auth_gateway.login(input_dto.username.strip(), input_dto.password))
        if not result.is_valid():
            raise InvalidProfileDataError(str(result.errors))

        profile = self.session.login(result.validated_data['token'], result.validated_data['user'])
        logger.info(f"Customer {profile.customer_id} logged in")

        return UseCaseResult.ok(
            AuthenticatedDTO(token=result.validated_data['token'], profile=profile)
        )
