"""Credentials supplied to a workflow run.

Credentials come from outside the engine (a settings panel, the environment)
and are read-only for the lifetime of one run.
"""

from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, Field

from flowrun.utils.config import get_openai_api_key


class Credentials(BaseModel):
    """Secrets available to node handlers.

    Attributes:
        openai_api_key: Key used by the AI generation steps
    """

    openai_api_key: Optional[str] = Field(None, alias="openaiApiKey")

    class Config:
        populate_by_name = True
        frozen = True

    @classmethod
    def from_env(cls) -> "Credentials":
        """Read credentials from environment variables."""
        return cls(openai_api_key=get_openai_api_key())

    @classmethod
    def coerce(cls, value: Union["Credentials", Mapping[str, Any], None]) -> "Credentials":
        """Accept a Credentials instance, a mapping, or None."""
        if value is None:
            return cls()
        if isinstance(value, Credentials):
            return value
        return cls.model_validate(dict(value))

    def __repr__(self) -> str:
        configured = "set" if self.openai_api_key else "unset"
        return f"Credentials(openai_api_key={configured})"
