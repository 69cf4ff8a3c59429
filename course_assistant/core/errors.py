from __future__ import annotations


class AssistantError(RuntimeError):
    """
    Base of every failure the request boundary turns into a plain-text response.

    `message` is what the caller sees; upstream details stay in the logs.
    """

    status_code = 500

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class InvalidRequestError(AssistantError):
    status_code = 400


class UnknownModeError(InvalidRequestError):
    def __init__(self, mode: str) -> None:
        super().__init__("Unknown mode")
        self.mode = mode


class InvalidTranscriptNameError(InvalidRequestError):
    def __init__(self, name: str) -> None:
        super().__init__("Invalid transcript name")
        self.name = name


class TranscriptNotFoundError(AssistantError):
    status_code = 404

    def __init__(self, name: str) -> None:
        super().__init__("Transcript not found")
        self.name = name


class ConfigurationError(AssistantError):
    status_code = 500


class MaterialsUnavailableError(AssistantError):
    status_code = 500


class EmptyMaterialsError(MaterialsUnavailableError):
    def __init__(self) -> None:
        super().__init__("No materials available for this section yet.")


class ContextTooLargeError(MaterialsUnavailableError):
    def __init__(self, estimated_tokens: int, max_tokens: int) -> None:
        super().__init__(f"Context too large: {estimated_tokens} tokens")
        self.estimated_tokens = estimated_tokens
        self.max_tokens = max_tokens


class GenerationError(AssistantError):
    status_code = 500
