"""Library exceptions."""


class CareerPagesError(Exception):
    """Base careerpages error."""


class ConfigurationError(CareerPagesError):
    """Missing or malformed environment configuration.

    Messages name the offending variable only; they never carry its value.
    """


class InvalidDocumentReference(CareerPagesError, ValueError):
    """A document URL that does not contain a Notion page id."""

    def __init__(self, reference: str):
        super().__init__("Invalid or missing Notion URL")
        self.reference = reference
