"""
LLM Clients module for interacting with language model providers.

This module provides the OpenAI client used to request structured output from
the Responses API.
"""

import json
from typing import Any

import openai
from openai.types.responses import ResponseInputItemParam, ResponseInputParam

from resume_tailor.common.exceptions import AIServiceError, EmptyResponseError, ResponseParseError
from resume_tailor.common.schemas.openai_schema import OpenAISchema
from resume_tailor.core.logger import logger


class OpenAIClient:
    """Client for interacting with OpenAI's Responses API.

    Every call is an independent request: no ``previous_response_id`` is
    carried between calls, so one tailoring attempt never sees another's
    conversation.

    Args:
        api_key: The OpenAI API key for authentication.
        temperature: The temperature for model responses (default: 0.7).
        max_retries: Automatic retries performed by the SDK (default: 0).
    """

    def __init__(self, api_key: str, temperature: float = 0.7, max_retries: int = 0) -> None:
        self.client = openai.OpenAI(api_key=api_key, max_retries=max_retries)
        self.temperature: float = temperature

    def _create_messages(self, user_prompt: str) -> ResponseInputParam:
        """Wrap the prompt as the single user message of a request.

        Raises:
            ValueError: If the prompt is empty.
        """
        if not user_prompt:
            raise ValueError("user_prompt must not be empty.")
        messages: list[ResponseInputItemParam] = [{"role": "user", "content": user_prompt}]
        return messages

    def get_structured_response(
        self,
        user_prompt: str,
        model_name: str,
        schema: OpenAISchema,
        schema_name: str = "structured_response",
    ) -> dict[str, Any]:
        """Get a structured response from the specified OpenAI model using the Responses API.

        Args:
            user_prompt: The user prompt to send to the model.
            model_name: The name of the OpenAI model to use.
            schema: Schema the service is constrained to answer with.
            schema_name: Name under which the schema is declared to the service.

        Returns:
            The decoded JSON object of the model's reply.

        Raises:
            ValueError: If the prompt is empty.
            AIServiceError: If the API call fails or the response carries an error.
            EmptyResponseError: If the response has no text payload.
            ResponseParseError: If the payload is not a JSON object.
        """
        messages = self._create_messages(user_prompt)

        # Create the text configuration for structured output
        text_config: Any = {"format": schema.to_text_format(schema_name)}

        try:
            response = self.client.responses.create(
                input=messages,
                model=model_name,
                text=text_config,
                temperature=self.temperature,
            )
        except openai.OpenAIError as e:
            raise AIServiceError(f"Error getting response: {str(e)}") from e

        if not hasattr(response, "id"):
            raise AIServiceError(f"Unexpected response type: {type(response)}")

        # Check for error in response
        if response.error:
            error_msg = f"API Error: {getattr(response.error, 'message', 'Unknown error')}"
            error_code = getattr(response.error, "code", None)
            if error_code:
                error_msg += f" (code: {error_code})"
            raise AIServiceError(error_msg)

        output_text = response.output_text.strip() if response.output_text else ""
        if not output_text:
            raise EmptyResponseError()
        logger.debug(f"Received structured response {response.id} ({len(output_text)} chars)")

        try:
            payload = json.loads(output_text)
        except json.JSONDecodeError as e:
            raise ResponseParseError(f"Failed to parse structured output as JSON: {str(e)}") from e

        if not isinstance(payload, dict):
            raise ResponseParseError(f"Structured output must be a JSON object, got {type(payload).__name__}")
        return payload
