class ValidationError(ValueError):
    """Exception raised when user-supplied data breaks a business rule."""


class MissingInput(ValidationError):  # noqa: N818
    """Exception raised when an operation receives no input at all."""


class DoesNotExist(Exception):  # noqa: N818
    """Exception raised when a resource does not exist."""

    def __init__(self, resource_type: str, resource_id: int | str):
        self.resource_type = resource_type
        self.resource_id = resource_id
        super().__init__(f'{resource_type} with ID "{resource_id!s}" does not exist')


class ServiceError(Exception):
    """
    Exception raised when a lower layer fails unexpectedly.

    The message is safe to show to the user; the underlying failure is kept
    in :attr:`error`.
    """

    def __init__(self, message: str, error: Exception):
        self.error = error
        super().__init__(message)


class ConfigurationError(Exception):
    """Exception raised when a required setting is missing."""

    def __init__(self, setting: str, source: str, reason: str = "is not found"):
        self.setting = setting
        self.source = source
        super().__init__(f"Setting '{setting}' {reason} in {source}")


class MigrationFailed(Exception):  # noqa: N818
    """Exception raised when the database schema could not be brought up to date."""

    def __init__(self, error: Exception, migration_version: str | None = None):
        self.error = error
        self.migration_version = migration_version
        super().__init__(f"Migration failed: {error!s}")
