"""Configuration constants and .env loading.

WHY: The CLI output directory, the HTTP bind address, the upload size limit
and the log level differ between a laptop and a deployed service. Keeping
them in one module as plain constants makes them easy to find and override.

HOW: python-dotenv loads the .env file on import. Each constant reads an
environment variable with a sensible default. Integer settings go through
_int_env() so a typo fails loudly at startup instead of deep in a request.

RULES:
- All defaults can be overridden via environment variables
- Integer settings that do not parse raise ValueError naming the variable
- Nothing in file_converter.core reads this module; only the CLI and server do
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()


def _int_env(name: str, default: int) -> int:
    """Read an integer environment variable, falling back to ``default``.

    RULES:
    - Missing or blank variable → default
    - Non-integer value → ValueError with the variable name in the message
    """
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(
            "Environment variable {} must be an integer, got {!r}".format(name, raw)
        ) from None


# ---------------------------------------------------------------------------
# CLI defaults
# ---------------------------------------------------------------------------

DEFAULT_OUTPUT_DIR = os.getenv("CONVERTER_OUTPUT_DIR", "result")
"""Directory the CLI writes converted files into when -o is not given."""

# ---------------------------------------------------------------------------
# HTTP server
# ---------------------------------------------------------------------------

SERVER_HOST = os.getenv("CONVERTER_HOST", "0.0.0.0")
SERVER_PORT = _int_env("CONVERTER_PORT", 8000)
MAX_UPLOAD_BYTES = _int_env("CONVERTER_MAX_UPLOAD_BYTES", 10 * 1024 * 1024)
LOG_LEVEL = os.getenv("CONVERTER_LOG_LEVEL", "INFO").upper()
