# storefront/domain/errors.py


class NotFoundError(ValueError):
    """Referenced entity does not exist in storage."""


class InvalidStateError(RuntimeError):
    """Business precondition of a workflow is violated."""
