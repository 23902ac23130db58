"""Exceptions raised by talentmatch collaborators."""


class TalentMatchError(Exception):
    """Base class for talentmatch errors."""
    pass


class AnchorNotFound(TalentMatchError):
    """Raised when the job or worker a match is anchored on does not exist."""

    def __init__(self, entity_type: str, entity_id: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} not found: {entity_id}")


class InvalidQuery(TalentMatchError):
    """Raised when match parameters cannot be used."""
    pass
