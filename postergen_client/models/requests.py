"""Request models sent to the poster backend."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class GenerationRequest(BaseModel):
    """Poster generation request built from caller arguments only.

    ``template_id`` travels as a query parameter; the remaining fields form
    the JSON body under the backend's fixed key names.
    """

    template_id: int
    business_name: str
    data: dict[str, Any]
    customization_data: dict[str, Any]

    def body(self) -> dict[str, Any]:
        """JSON body for ``POST /posters/generate``."""
        return self.model_dump(exclude={"template_id"})
