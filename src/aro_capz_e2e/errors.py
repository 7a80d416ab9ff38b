"""Domain errors for the ARO CAPZ end-to-end helpers."""

from typing import Optional


class E2EError(RuntimeError):
    """Raised when a suite step cannot continue safely."""


class YAMLValidationError(E2EError):
    """Raised when a YAML file cannot be handed to the provisioning pipeline."""

    def __init__(self, message: str, path: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.path = path
        self.cause = cause


class FileNotAccessibleError(YAMLValidationError):
    """The file is missing, unreadable or not a regular file."""


class EmptyFileError(YAMLValidationError):
    """The file has no content at all."""


class InvalidYAMLSyntaxError(YAMLValidationError):
    """The YAML parser rejected the content."""


class NoDataInFileError(YAMLValidationError):
    """The content parsed but holds no documents with data."""
