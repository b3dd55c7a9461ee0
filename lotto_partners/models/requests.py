from typing import Any

from pydantic import BaseModel, Field


class ProxyRequest(BaseModel):
    """Incoming request to the completion proxy."""

    contents: Any = Field(default=None, description="Prompt payload: text or provider content structure")
    config: dict[str, Any] | None = Field(default=None, description="Provider generation options")

    @property
    def has_contents(self) -> bool:
        """False for null and falsy scalars (``""``, ``0``, ``false``). Empty lists and objects count."""
        if self.contents is None:
            return False
        if isinstance(self.contents, (str, int, float)):
            return bool(self.contents)
        return True
