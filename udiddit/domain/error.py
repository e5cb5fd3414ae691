"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """A derived name or value violates a schema constraint.

    Fatal during migration: names are identifiers and are never truncated.
    """

    pass


class ResolutionError(DomainError):
    """A legacy record references a name or post that was never derived.

    Signals an incomplete derivation pass and aborts the migration.
    """

    def __init__(self, kind: str, key: str):
        self.kind = kind
        self.key = key
        super().__init__(f"Unresolved {kind} reference: {key!r}")


class AmbiguousContentError(DomainError):
    """A legacy post has both a URL and text content."""

    def __init__(self, legacy_post_id: int):
        self.legacy_post_id = legacy_post_id
        super().__init__(
            f"Legacy post {legacy_post_id} has both url and text content"
        )


class MigrationAlreadyAppliedError(DomainError):
    """The normalized target already holds users or topics."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
