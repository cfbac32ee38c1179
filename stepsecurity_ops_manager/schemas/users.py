"""Pydantic schemas for StepSecurity users and their access policies."""

from pydantic import Field

from stepsecurity_ops_manager.schemas.base import WireModel


class UserPolicy(WireModel):
    """Pydantic model for an access policy granted to a user."""

    omit_empty = frozenset({"type", "role", "scope", "organization", "repos", "group", "projects"})

    type: str = ""
    role: str = ""
    scope: str = ""
    organization: str = ""
    repos: list[str] = Field(default_factory=list)
    group: str = ""
    projects: list[str] = Field(default_factory=list)


class User(WireModel):
    """Pydantic model for a StepSecurity user."""

    omit_empty = frozenset(
        {"id", "email", "user_name", "email_suffix", "identifier", "auth_type", "added_at", "updated_at", "updated_by", "policies"}
    )

    id: str = ""
    email: str = ""
    user_name: str = ""
    email_suffix: str = ""
    identifier: str = ""
    auth_type: str = ""
    added_at: int = 0
    updated_at: int = 0
    updated_by: str = ""
    policies: list[UserPolicy] = Field(default_factory=list)


class CreateUserRequest(WireModel):
    """Pydantic model for the creation of a single user."""

    email: str = ""
    user_name: str = ""
    email_suffix: str = ""
    auth_type: str = ""
    policies: list[UserPolicy] = Field(default_factory=list)


class CreateUserResponse(WireModel):
    """Pydantic model for a user reported as added by the API."""

    id: str = ""
    identifier: str = ""


class BulkCreateUsersRequest(WireModel):
    """Pydantic model for the bulk-shaped body accepted by the users endpoint."""

    emails: list[str] | None = None
    user_names: list[str] | None = None
    email_suffixes: list[str] | None = None
    identifier: str = ""
    auth_type: str = ""
    policies: list[UserPolicy] = Field(default_factory=list)

    @classmethod
    def for_single_user(cls, request: CreateUserRequest) -> "BulkCreateUsersRequest":
        """Wrap a single user creation into single-element lists."""
        return cls(
            emails=[request.email] if request.email else None,
            user_names=[request.user_name] if request.user_name else None,
            email_suffixes=[request.email_suffix] if request.email_suffix else None,
            auth_type=request.auth_type,
            policies=request.policies,
        )


class BulkCreateUsersResponse(WireModel):
    """Pydantic model for the response to a bulk user creation."""

    users_added: list[CreateUserResponse] = Field(default_factory=list)
    failed_users: list[str] = Field(default_factory=list)


class UpdateUserRequest(WireModel):
    """Pydantic model for replacing the policies of a user."""

    user_id: str
    policies: list[UserPolicy] = Field(default_factory=list)
