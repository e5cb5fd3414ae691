"""Domain value objects for Udiddit.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules for the normalized schema.
"""

from enum import Enum

from pydantic import field_validator

from udiddit.domain.value.common import RootValueObject, ValueObject

USERNAME_MAX_LENGTH = 25
TOPIC_NAME_MAX_LENGTH = 30
POST_TITLE_MAX_LENGTH = 100
TOPIC_DESCRIPTION_MAX_LENGTH = 500


class VoteDirection(int, Enum):
    """Direction of a vote, stored as a signed small integer."""

    UP = 1
    DOWN = -1


class Username(RootValueObject[str]):
    """Unique user name.

    At most 25 characters and not blank. Uniqueness is case-sensitive.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username length and emptiness."""
        if not v.strip():
            raise ValueError("Username can't be empty")
        if len(v) > USERNAME_MAX_LENGTH:
            raise ValueError(
                f"Username must be at most {USERNAME_MAX_LENGTH} characters"
            )
        return v


class TopicName(RootValueObject[str]):
    """Unique topic name, at most 30 characters and not blank."""

    @field_validator("root")
    @classmethod
    def validate_topic_name(cls, v: str) -> str:
        """Validate topic name length and emptiness."""
        if not v.strip():
            raise ValueError("Topic name can't be empty")
        if len(v) > TOPIC_NAME_MAX_LENGTH:
            raise ValueError(
                f"Topic name must be at most {TOPIC_NAME_MAX_LENGTH} characters"
            )
        return v


class RejectionKind(str, Enum):
    """Why a legacy record was not written."""

    DUPLICATE_VOTE = "duplicate_vote"
    AMBIGUOUS_CONTENT = "ambiguous_content"
    MISSING_CONTENT = "missing_content"
    CONSTRAINT_VIOLATION = "constraint_violation"
    ORPHANED = "orphaned"


class IntegrityRejection(ValueObject):
    """A single legacy record skipped during migration.

    Rejections are non-fatal: the migration continues and they are
    reported once the transaction has committed.
    """

    kind: RejectionKind
    entity: str  # "post", "comment" or "vote"
    key: str  # Identifying key of the legacy record
    reason: str
