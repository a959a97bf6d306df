"""Base service class for domain services."""

from bulletin.domain.error import ValidationError


class Service:
    """Base class for all domain services.

    Domain services contain business logic that doesn't naturally belong
    to a single entity or spans multiple entities/aggregates.
    """

    pass


def ensure_content_length(content: str | None, max_length: int) -> None:
    """Reject content longer than the configured maximum.

    Raises:
        ValidationError: If content exceeds max_length characters
    """
    if content is not None and len(content) > max_length:
        raise ValidationError(
            f"Content length exceeds maximum allowed length of {max_length} "
            f"characters. Current length: {len(content)}"
        )
