"""Environment configuration for flowrun.

Settings are read from the process environment, optionally seeded from a
``.env`` file:

    OPENAI_API_KEY               key used by ``Credentials.from_env()``
    FLOWRUN_FUNCTIONS_URL        base URL of the hosted AI functions
    FLOWRUN_FUNCTIONS_ANON_KEY   bearer token for the hosted functions
    FLOWRUN_REQUEST_TIMEOUT      remote call timeout in seconds (default 30)
"""

import os
from typing import Optional

from dotenv import load_dotenv

DEFAULT_REQUEST_TIMEOUT = 30.0


def load_env(env_file: Optional[str] = None) -> None:
    """Seed the environment from a ``.env`` file.

    Variables that are already set are left alone.

    Args:
        env_file: Path to the file; when omitted python-dotenv looks for
            ``.env`` starting from the working directory

    Example:
        >>> load_env()
        >>> credentials = Credentials.from_env()
    """
    if env_file:
        load_dotenv(env_file)
    else:
        load_dotenv()


def get_config(key: str, default: Optional[str] = None) -> Optional[str]:
    """Read one setting, or ``default`` when unset."""
    return os.getenv(key, default)


def get_openai_api_key() -> Optional[str]:
    return get_config("OPENAI_API_KEY")


def ensure_api_key() -> str:
    """Return the OpenAI key, failing loudly when it is missing.

    Raises:
        ValueError: If OPENAI_API_KEY is unset or empty
    """
    key = get_openai_api_key()
    if key:
        return key
    raise ValueError(
        "OPENAI_API_KEY not found. Export it or add it to a .env file "
        "loaded with load_env()."
    )


def get_functions_url() -> Optional[str]:
    """Base URL of the hosted functions that proxy AI calls."""
    url = get_config("FLOWRUN_FUNCTIONS_URL")
    return url.rstrip("/") if url else None


def get_functions_anon_key() -> Optional[str]:
    """Bearer token sent to the hosted functions."""
    return get_config("FLOWRUN_FUNCTIONS_ANON_KEY")


def get_request_timeout() -> float:
    """Timeout in seconds for remote calls.

    Falls back to the default when the variable is unset or not a number.
    """
    raw = get_config("FLOWRUN_REQUEST_TIMEOUT")
    if not raw:
        return DEFAULT_REQUEST_TIMEOUT
    try:
        return float(raw)
    except ValueError:
        return DEFAULT_REQUEST_TIMEOUT
