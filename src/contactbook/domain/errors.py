"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class ContactError(Exception):
    """Base class for contact-layer errors."""


# ============================================================================
#                   Contact validation errors
# ============================================================================


class MissingContactFieldError(ContactError, ValueError):
    """Raised when a required contact field is None."""

    def __init__(self, field_name: str) -> None:
        super().__init__(f"Contact field '{field_name}' must not be None.")
        self.field_name = field_name
