"""Domain layer errors."""

from collections.abc import Sequence


class DomainError(Exception):
    """Base domain error."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to modify content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class IntegrityViolationError(DomainError):
    """Raised when stored or requested data breaks a referential invariant.

    Examples are a reply whose parent lives on another article, or a comment
    that references an author who does not exist.
    """

    pass


class CommentCycleError(IntegrityViolationError):
    """Raised when the parent chain of comments loops back on itself."""

    def __init__(self, comment_ids: Sequence[int]):
        self.comment_ids = list(comment_ids)
        chain = " -> ".join(str(cid) for cid in self.comment_ids)
        super().__init__(f"Comment parent cycle detected: {chain}")
