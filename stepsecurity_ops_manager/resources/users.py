"""Client for the customer-scoped users resource."""

import structlog

from stepsecurity_ops_manager.schemas.users import (
    BulkCreateUsersRequest,
    BulkCreateUsersResponse,
    CreateUserRequest,
    CreateUserResponse,
    UpdateUserRequest,
    User,
)
from stepsecurity_ops_manager.stepsecurity.exceptions import UserCreationError
from stepsecurity_ops_manager.stepsecurity.resource import ResourceClient, log_api_errors

logger = structlog.get_logger(__name__)


class UsersClient(ResourceClient):
    """Lists, creates, reads, updates and deletes StepSecurity users."""

    @log_api_errors("list users")
    async def list_users(self) -> list[User]:
        """List every user of the customer."""
        body = await self.transport.get(self.customer_uri("users"))
        return self.decode(list[User] | None, body, "users") or []

    @log_api_errors("create user")
    async def create_user(self, request: CreateUserRequest) -> CreateUserResponse:
        """Create a single user.

        The endpoint only accepts bulk-shaped bodies, so the user is sent as
        single-element lists and exactly one added user is expected back.

        Raises:
            UserCreationError: If the API reports that no user was added.
        """
        logger.info("Creating user", customer=self.transport.customer, email=request.email, user_name=request.user_name)
        payload = BulkCreateUsersRequest.for_single_user(request)
        body = await self.transport.post(self.customer_uri("users"), payload.to_wire())
        response = self.decode(BulkCreateUsersResponse, body, "create user response")
        if not response.users_added:
            raise UserCreationError(response.failed_users)
        return response.users_added[0]

    @log_api_errors("get user")
    async def get_user(self, user_id: str) -> User:
        """Get a user by ID."""
        body = await self.transport.get(self.customer_uri("users", user_id))
        return self.decode(User, body, "user")

    @log_api_errors("update user")
    async def update_user(self, request: UpdateUserRequest) -> None:
        """Replace the policies of a user."""
        logger.info("Updating user", customer=self.transport.customer, user_id=request.user_id)
        await self.transport.put(self.customer_uri("users", request.user_id), request.to_wire())

    @log_api_errors("delete user")
    async def delete_user(self, user_id: str) -> None:
        """Delete a user by ID."""
        logger.info("Deleting user", customer=self.transport.customer, user_id=user_id)
        await self.transport.delete(self.customer_uri("users", user_id))
