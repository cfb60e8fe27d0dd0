"""
Project environment file exporter.

Writes and reads a project's environment variables to and from a dotenv
file whose location is derived from the project ID.

Dependencies: python-dotenv, easyenv.configs, easyenv.core.exceptions, easyenv.models
System role: File-exported copy of each project's environment
"""

import logging
from pathlib import Path
from typing import Mapping

from dotenv import dotenv_values, set_key

from easyenv.configs.env_files import EnvFileSettings
from easyenv.core.exceptions import FileReadError, FileWriteError
from easyenv.models.environment import is_valid_key

logger = logging.getLogger(__name__)


class EnvFileExporter:
    """
    Dotenv-backed store for project environments.

    Each project maps to ``<env_dir>/<project_id><suffix>``. Writes are a full
    overwrite of that file and are not atomic: a failure part way through
    leaves a partially written file.

    Attributes:
        env_dir: Directory holding the environment files
        suffix: File name suffix appended to the project ID
        encoding: Text encoding for reading and writing
    """

    def __init__(
        self,
        env_dir: Path | str,
        suffix: str = ".env",
        encoding: str = "utf-8",
    ) -> None:
        self.env_dir = Path(env_dir).expanduser()
        self.suffix = suffix
        self.encoding = encoding

    @classmethod
    def from_settings(cls, settings: EnvFileSettings) -> "EnvFileExporter":
        """
        Build an exporter from environment file settings.

        Args:
            settings: Environment file configuration

        Returns:
            EnvFileExporter: Exporter rooted at settings.env_dir
        """
        return cls(
            env_dir=settings.env_dir,
            suffix=settings.suffix,
            encoding=settings.encoding,
        )

    def path_for(self, project_id: str) -> Path:
        """Return the file location for a project ID."""
        return self.env_dir / f"{project_id}{self.suffix}"

    def write(self, project_id: str, environments: Mapping[str, str]) -> None:
        """
        Replace the project's environment file with the given variables.

        Keys are checked before the file is touched. After writing, the file
        is parsed back and must yield exactly the given variables.

        Args:
            project_id: Project identity the file is keyed by
            environments: Variables to write

        Raises:
            FileWriteError: If a key cannot be represented, the directory or
                file cannot be written, or the written file does not read
                back unchanged
        """
        path = self.path_for(project_id)

        invalid = [key for key in environments if not is_valid_key(key)]
        if invalid:
            logger.error(
                "Environment keys cannot be written",
                extra={"project_id": project_id, "path": str(path), "keys": invalid},
            )
            raise FileWriteError(
                f"Environment keys cannot be represented in a dotenv file: {invalid}",
                project_id=project_id,
                path=path,
            )

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("", encoding=self.encoding)
            for key, value in environments.items():
                set_key(path, key, value, quote_mode="always", encoding=self.encoding)
            written = dotenv_values(path, encoding=self.encoding)
        except (OSError, UnicodeError) as e:
            logger.error(
                "Failed to write environment file",
                extra={"project_id": project_id, "path": str(path), "error": str(e)},
            )
            raise FileWriteError(
                f"Unable to write environment file: {e}",
                project_id=project_id,
                path=path,
            ) from e

        mismatched = sorted(
            key
            for key in set(environments) | set(written)
            if written.get(key) != environments.get(key)
        )
        if mismatched:
            logger.error(
                "Environment file does not match written variables",
                extra={"project_id": project_id, "path": str(path), "keys": mismatched},
            )
            raise FileWriteError(
                f"Environment file did not read back unchanged for keys: {mismatched}",
                project_id=project_id,
                path=path,
            )

        logger.debug(
            "Environment file written",
            extra={"project_id": project_id, "path": str(path), "count": len(environments)},
        )

    def read(self, project_id: str) -> dict[str, str]:
        """
        Read the project's environment file.

        Keys declared without a value are skipped.

        Args:
            project_id: Project identity the file is keyed by

        Returns:
            dict[str, str]: Variables in file order

        Raises:
            FileReadError: If the file is missing or unreadable
        """
        path = self.path_for(project_id)
        if not path.is_file():
            raise FileReadError(
                "Environment file not found",
                project_id=project_id,
                path=path,
            )

        try:
            raw = dotenv_values(path, encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(
                "Failed to read environment file",
                extra={"project_id": project_id, "path": str(path), "error": str(e)},
            )
            raise FileReadError(
                f"Unable to read environment file: {e}",
                project_id=project_id,
                path=path,
            ) from e

        return {key: value for key, value in raw.items() if value is not None}
