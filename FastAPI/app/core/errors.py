"""Domain errors raised by repos and services; routers map them to HTTP status codes."""


class RecruitingError(Exception):
    pass


class NotFoundError(RecruitingError):
    def __init__(self, entity: str, entity_id: str | None = None):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found")


class InvalidInputError(RecruitingError, ValueError):
    pass


class ExternalServiceDegraded(RecruitingError):
    """The AI capability could not be reached or returned something unusable."""


class ConflictError(RecruitingError):
    """A write hit a uniqueness constraint (e.g. two submissions racing on one email)."""
