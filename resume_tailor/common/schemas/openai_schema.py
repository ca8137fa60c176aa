from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class OpenAISchema(BaseModel):
    """Pydantic representation of an OpenAI JSON Schema.

    This mirrors the JSON schema that is sent to the OpenAI *Responses* API for
    structured output. Encapsulating it in a model allows us to:

    • Keep strong typing throughout the codebase (no loose ``dict`` objects).
    • Check up front that every property is listed as required, which the API
      demands in strict mode.
    • Easily convert back to the raw ``dict`` with ``.model_dump()`` when
      making the API call.
    """

    type: str = Field(default="object", description="The schema root type (always 'object').")
    properties: dict[str, Any] = Field(default_factory=dict, description="Mapping of field names → schema.")
    required: list[str] = Field(default_factory=list, description="Required property names.")
    additionalProperties: bool = Field(default=False, description="Whether additional props are allowed.")

    def missing_required(self) -> list[str]:
        """Return the declared properties that are not listed in ``required``."""
        return [name for name in self.properties if name not in self.required]

    def to_text_format(self, name: str) -> dict[str, Any]:
        """Build the strict ``text.format`` block of a Responses API call.

        Raises:
            ValueError: If some properties are not listed in ``required``.
        """
        if self.missing_required():
            raise ValueError(
                f"Strict schemas must require every property; missing: {', '.join(self.missing_required())}"
            )
        return {
            "type": "json_schema",
            "name": name,
            "strict": True,
            "schema": self.model_dump(),
        }
