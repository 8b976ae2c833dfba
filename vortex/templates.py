"""Collect template filenames from the command line or a pipe."""

import re
import sys
from typing import Optional, Sequence, TextIO

from . import shlex_parser
from .errors import ConflictingTemplateSources

# Section headers are a bracketed name on their own line, e.g. [Body]
SECTION_HEADER = re.compile(r"\[[A-Za-z]+\]")


def read_piped_filenames(stdin: Optional[TextIO] = None) -> list[str]:
    """Split filenames piped on stdin; an interactive terminal yields none."""
    if stdin is None:
        stdin = sys.stdin
    if stdin is None or stdin.isatty():
        return []
    return shlex_parser.split(stdin.read())


def get_template_filenames(
    args: Sequence[str], stdin: Optional[TextIO] = None
) -> list[str]:
    """
    Get the template filenames to process.

    Filenames come either from positional arguments or from stdin, e.g.
    ``ls *.ini | vortex show``. Giving both is an error.
    """
    filenames = list(args)
    piped = read_piped_filenames(stdin)

    if filenames and piped:
        raise ConflictingTemplateSources(
            "Template filenames are provided via stdin and as arguments"
        )

    return filenames or piped


def body_lines(text: str) -> list[str]:
    """Return the lines of a template's [Body] section, minus comments."""
    lines = []
    in_body = False
    for line in text.splitlines():
        stripped = line.strip()
        if SECTION_HEADER.fullmatch(stripped):
            in_body = stripped == "[Body]"
            continue
        if in_body and not stripped.startswith("#"):
            lines.append(line)

    # Drop blank lines separating the body from the next section
    while lines and not lines[-1].strip():
        lines.pop()
    return lines
