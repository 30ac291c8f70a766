"""App connection error messages.

Message templates shared by the connection service and its tests. Existing
API clients match on these strings, so wording is fixed.

Usage:
    from src.domain.errors import AppConnectionErrorMessage

    message = AppConnectionErrorMessage.NOT_FOUND_BY_ID.format(id=connection_id)
"""


class AppConnectionErrorMessage:
    """App connection error message templates.

    These are NOT exceptions. Each constant is a ``str.format`` template used
    to build the message of a DomainError returned in a Failure.
    """

    # Lookup errors
    NOT_FOUND_BY_ID = "Could not find App Connection with ID {id}"
    NOT_FOUND_BY_NAME = "Could not find App Connection with name {name}"

    # Variant consistency errors
    APP_MISMATCH_BY_ID = 'App Connection with ID {id} is not for App "{app}"'
    APP_MISMATCH_BY_NAME = 'App Connection with name {name} is not for App "{app}"'

    # Uniqueness errors
    NAME_ALREADY_EXISTS = 'An App Connection with the name "{name}" already exists.'

    # Integrity errors
    STORED_CREDENTIALS_INVALID = (
        "Stored credentials of App Connection with ID {id} do not match "
        'App "{app}" method "{method}"'
    )
