"""Contains exceptions raised when reconciling application configuration."""


class ConfigurationError(Exception):
    """Base class for errors detected before any network call is made."""

    pass


class RequiredConfigurationElementError(ConfigurationError):
    """Raised when a required configuration element is missing."""

    def __init__(self, name: str, cli_name: str, env_name: str) -> None:
        """Initializes the exception with the name of the missing element."""
        super().__init__(f"Input required and not supplied: {name} (command line option {cli_name}, environment variable {env_name})")
        self.name = name
        self.cli_name = cli_name
        self.env_name = env_name


class InvalidConfigurationElementError(ConfigurationError):
    """Raised when a configuration element is present but unusable."""

    def __init__(self, name: str, value: str, reason: str) -> None:
        """Initializes the exception with the offending element and the reason it was rejected."""
        super().__init__(f"Invalid value {value!r} for {name}: {reason}")
        self.name = name
        self.value = value
        self.reason = reason


class RepositoryContextUndefinedError(ConfigurationError):
    """Raised when the repository or commit of the current run cannot be determined."""

    pass
