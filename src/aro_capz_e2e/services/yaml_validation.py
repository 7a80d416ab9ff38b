"""YAML manifest validation before files are handed to the cluster."""

import logging
from pathlib import Path
from typing import Any, List, Optional, Union

import yaml

from aro_capz_e2e.errors import (
    EmptyFileError,
    FileNotAccessibleError,
    InvalidYAMLSyntaxError,
    NoDataInFileError,
)
from aro_capz_e2e.errors_catalog import actionable_error

PathLike = Union[str, Path]


class YamlValidationService:
    """Checks that a file holds at least one parseable YAML document with data."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger("aro_capz_e2e")

    def validate(self, path: PathLike) -> None:
        file_path = str(path)

        try:
            content = Path(file_path).read_bytes()
        except OSError as exc:
            raise FileNotAccessibleError(
                actionable_error("file_not_accessible", path=file_path, reason=str(exc)),
                path=file_path,
                cause=exc,
            ) from exc

        if not content:
            raise EmptyFileError(actionable_error("empty_file", path=file_path), path=file_path)

        documents = self._load_documents(content, file_path)

        if not any(document is not None for document in documents):
            if not content.strip():
                raise InvalidYAMLSyntaxError(
                    actionable_error(
                        "invalid_yaml_syntax",
                        path=file_path,
                        reason="content is only whitespace",
                    ),
                    path=file_path,
                )
            raise NoDataInFileError(actionable_error("no_yaml_data", path=file_path), path=file_path)

        self.logger.debug("Validated %s (%s document(s))", file_path, len(documents))

    @staticmethod
    def _load_documents(content: bytes, file_path: str) -> List[Any]:
        try:
            return list(yaml.safe_load_all(content))
        except yaml.YAMLError as exc:
            raise InvalidYAMLSyntaxError(
                actionable_error("invalid_yaml_syntax", path=file_path, reason=str(exc)),
                path=file_path,
                cause=exc,
            ) from exc


def validate_yaml_file(path: PathLike) -> None:
    """Raise a ``YAMLValidationError`` subclass when ``path`` is not usable YAML."""
    YamlValidationService().validate(path)
