"""Backend selection and the starter template."""

import shutil
from typing import Optional, Sequence

from .errors import NoBackendAvailable

# Most preferred first
BACKEND_PRIORITY_ORDER = [
    "curl",
    "httpie",
    "wget",
]

# Executable names that differ from the backend name
BACKEND_EXECUTABLES = {
    "httpie": "http",
}

BACKENDS_PLACEHOLDER = "{{ Backends }}"

STARTER_TEMPLATE = """[Host]
http://localhost:${PORT}

[Headers]
Content-Type: application/json

# [Query]
# key1=value1&key2=value2

# [Body]
# {
#   "key": "value"
# }

[Backend]
{{ Backends }}
"""


def backend_executable(backend: str) -> str:
    return BACKEND_EXECUTABLES.get(backend, backend)


def is_installed(backend: str) -> bool:
    return shutil.which(backend_executable(backend)) is not None


def available_backends() -> list[str]:
    """List the installed backends in priority order."""
    return [b for b in BACKEND_PRIORITY_ORDER if is_installed(b)]


def select_backend(preferred: Optional[str] = None) -> str:
    """Pick the preferred backend if installed, else the best available one."""
    if preferred and is_installed(preferred):
        return preferred

    available = available_backends()
    if not available:
        raise NoBackendAvailable(
            f"None of the supported backends is installed: {', '.join(BACKEND_PRIORITY_ORDER)}"
        )
    return available[0]


def render_starter_template(backends: Optional[Sequence[str]] = None) -> str:
    """Fill the backend section of the starter template."""
    if backends is None:
        backends = BACKEND_PRIORITY_ORDER
    return STARTER_TEMPLATE.replace(BACKENDS_PLACEHOLDER, "\n".join(backends))
