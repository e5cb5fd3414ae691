"""Delete user use case."""

from pydantic import BaseModel

from udiddit.application.usecase.base import BaseUseCase
from udiddit.domain.service import UserService
from udiddit.domain.value import UserId


class DeleteUserRequest(BaseModel):
    """Delete user request."""

    user_id: int


class DeleteUserUseCase(BaseUseCase[DeleteUserRequest, None]):
    """Use case for deleting a user while keeping their content."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: DeleteUserRequest) -> None:
        """Delete the user; posts, comments and votes lose their author."""
        await self.user_service.delete_user(UserId(request.user_id))
