"""Request configuration and the temp file holding a request body."""

import contextlib
import os
import tempfile
from dataclasses import dataclass, field
from typing import Optional

from .errors import BodyTempfileError


@dataclass
class RequestConfig:
    """Everything needed to hand a request to a backend."""

    host: Optional[str] = None
    body: list[str] = field(default_factory=list)
    method: str = ""
    headers: list[str] = field(default_factory=list)
    backend: str = ""
    backend_options: list[list[str]] = field(default_factory=list)
    # Print the backend command instead of hiding it
    verbose: bool = False
    # Keep the body temp file around after the request
    tempfile: bool = False
    tempfile_name: str = ""

    def create_body_tempfile(self) -> None:
        """
        Write the body to a temp file the backend can read from.

        The file goes in the current directory when verbose, so the printed
        command stays usable after the run.
        """
        if not self.body:
            return

        directory = os.getcwd() if self.verbose else None
        try:
            fd, name = tempfile.mkstemp(prefix="vortex-body", dir=directory)
        except OSError as e:
            raise BodyTempfileError(f"Failed to create temporary file: {e}") from e

        try:
            with os.fdopen(fd, "w") as f:
                f.write("\n".join(self.body))
        except OSError as e:
            with contextlib.suppress(FileNotFoundError):
                os.remove(name)
            raise BodyTempfileError(f"Failed to write to temporary file: {e}") from e

        self.tempfile_name = name

    def remove_body_tempfile(self, force: bool = False) -> None:
        """Delete the body temp file unless it should be kept (and not forced)."""
        if not self.tempfile_name:
            return
        if self.tempfile and not force:
            return

        name = self.tempfile_name
        self.tempfile_name = ""
        try:
            os.remove(name)
        except OSError as e:
            raise BodyTempfileError(f"Failed to remove temporary file: {e}") from e
