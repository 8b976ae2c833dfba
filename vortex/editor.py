"""Open templates in the user's editor and read them back."""

import contextlib
import os
import shutil
import subprocess
import tempfile
from typing import Mapping, Optional

from . import shlex_parser
from .errors import EditorFailed, EditorNotFound, TemplateReadError, UnterminatedQuote

# Template names ending with this suffix are opened in the editor first
EDIT_FILE_SUFFIX = "!"

# Used when neither VISUAL nor EDITOR is set
FALLBACK_EDITOR = "code"


def resolve_editor_command(
    environ: Optional[Mapping[str, str]] = None,
) -> tuple[str, list[str]]:
    """
    Work out which editor to run.

    VISUAL wins over EDITOR; when both are unset the fallback editor is used
    if it is on PATH. The command string is split with the shell-like lexer
    so it may carry its own flags (e.g. ``EDITOR="code --wait"``).

    Returns:
        (source, argv): where the command came from and the split command
    """
    if environ is None:
        environ = os.environ

    source = "VISUAL"
    command = environ.get(source, "")
    if not command:
        source = "EDITOR"
        command = environ.get(source, "")
    if not command:
        if shutil.which(FALLBACK_EDITOR) is None:
            raise EditorNotFound(
                "Could not find a suitable editor to open the file. "
                "Please set the VISUAL or EDITOR environment variable to specify an editor."
            )
        source = FALLBACK_EDITOR
        command = FALLBACK_EDITOR

    try:
        argv = shlex_parser.split(command)
    except UnterminatedQuote as e:
        raise EditorFailed(f"Failed to parse editor command: {e}") from e

    if not argv:
        raise EditorFailed(f"Editor command from {source} is empty")

    return source, argv


def capture_editor_output(
    path: str, environ: Optional[Mapping[str, str]] = None
) -> str:
    """Run the editor on path, wait for it to exit and return the file content."""
    source, argv = resolve_editor_command(environ)
    cmd = argv + [path]

    try:
        result = subprocess.run(cmd)
    except OSError as e:
        raise EditorFailed(
            f"Failed to run editor command {source} {' '.join(cmd)}: {e}"
        ) from e

    if result.returncode != 0:
        raise EditorFailed(
            f"Editor command {source} {' '.join(cmd)} exited with status {result.returncode}"
        )

    try:
        with open(path, "r") as f:
            return f.read()
    except OSError as e:
        raise TemplateReadError(f"Failed to read the content of the file: {e}") from e


def load_edited_template_content(
    src: str, environ: Optional[Mapping[str, str]] = None
) -> str:
    """Copy a template to a temp file, edit the copy and return its content."""
    try:
        with open(src, "r") as f:
            raw = f.read()
    except OSError as e:
        raise TemplateReadError(f"Cannot open the template file: {src}") from e

    # Editors pick up syntax highlighting from the .ini suffix
    fd, tmp_path = tempfile.mkstemp(prefix="vtx", suffix=".ini")
    try:
        with os.fdopen(fd, "w") as f:
            f.write(raw)
        return capture_editor_output(tmp_path, environ)
    finally:
        # The editor may have moved or deleted the copy
        with contextlib.suppress(FileNotFoundError):
            os.remove(tmp_path)


def read_raw_template_string(
    filename: str, environ: Optional[Mapping[str, str]] = None
) -> str:
    """
    Read a template file.

    A trailing EDIT_FILE_SUFFIX opens the template in the editor and returns
    the edited text; the file on disk is left untouched.
    """
    if filename.endswith(EDIT_FILE_SUFFIX):
        return load_edited_template_content(
            filename[: -len(EDIT_FILE_SUFFIX)], environ
        )

    try:
        with open(filename, "r") as f:
            return f.read()
    except OSError as e:
        raise TemplateReadError(f"Failed to read the file: {filename}") from e
