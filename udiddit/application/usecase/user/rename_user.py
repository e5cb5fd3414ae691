"""Rename user use case."""

from datetime import datetime

from pydantic import BaseModel

from udiddit.application.usecase.base import BaseUseCase
from udiddit.domain.service import UserService
from udiddit.domain.value import UserId, Username


class RenameUserRequest(BaseModel):
    """Rename user request."""

    user_id: int
    username: str


class RenameUserResponse(BaseModel):
    """Rename user response."""

    user_id: int
    username: str
    username_updated: datetime | None


class RenameUserUseCase(BaseUseCase[RenameUserRequest, RenameUserResponse]):
    """Use case for changing a user's username."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize rename user use case.

        Args:
            user_service: User service
        """
        self.user_service = user_service

    async def execute(self, request: RenameUserRequest) -> RenameUserResponse:
        """Execute rename flow.

        Raises:
            pydantic.ValidationError: If the username is blank or too long
            NotFoundError: If the user does not exist
            BusinessRuleViolationError: If the username is taken
        """
        user = await self.user_service.rename_user(
            UserId(request.user_id), Username(request.username)
        )
        return RenameUserResponse(
            user_id=user.id,
            username=user.username.root,
            username_updated=user.username_updated,
        )
