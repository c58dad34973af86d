"""Custom exceptions for Release Tagger."""


class ReleaseTaggerError(Exception):
    """Base class for all Release Tagger errors."""


class ConfigurationOrderError(ReleaseTaggerError):
    """Raised when a required value has not been provided by an earlier step."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(
            f"The {field} is not available yet, a previous step must provide it"
        )


class NoReleaseFoundError(ReleaseTaggerError):
    """Raised when no tag in the repository identifies a release."""


class UnrecognizedPlaceholderError(ReleaseTaggerError):
    """Raised when a tag prefix references an unknown placeholder."""

    def __init__(self, placeholder: str):
        self.placeholder = placeholder
        super().__init__(
            f"There is no rule to process the prefix placeholder [{placeholder}]"
        )


class ConfigurationError(ReleaseTaggerError):
    """Raised when the configuration file cannot be used."""


class GitOperationError(ReleaseTaggerError):
    """Raised when Git or GitHub clients cannot be set up."""
