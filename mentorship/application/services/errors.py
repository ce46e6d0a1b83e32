"""Service-level errors translated to HTTP responses by the routers."""


class NotFoundError(LookupError):
    """Requested record does not exist (404)."""


class OperationRejectedError(ValueError):
    """Request is well-formed but the current record state forbids it (400)."""
