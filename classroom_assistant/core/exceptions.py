"""Custom exceptions for the classroom assistant."""

from typing import Any, Dict, Optional


class ClassroomAssistantError(Exception):
    """Base exception for all classroom assistant errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        """String representation of the error."""
        parts = [self.message]
        if self.error_code:
            parts.append(f"(code: {self.error_code})")
        return " ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        return {
            "error": self.message,
            "error_code": self.error_code,
            "details": self.details,
        }


class ConfigurationError(ClassroomAssistantError):
    """Raised when there's a configuration issue."""

    def __init__(self, message: str, config_key: Optional[str] = None) -> None:
        details = {"config_key": config_key} if config_key else {}
        super().__init__(message, "CONFIGURATION_ERROR", details)


class ValidationError(ClassroomAssistantError):
    """Raised when data validation fails."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class DatabaseError(ClassroomAssistantError):
    """Raised when there's a database issue."""

    def __init__(self, message: str, operation: Optional[str] = None) -> None:
        details = {"operation": operation} if operation else {}
        super().__init__(message, "DATABASE_ERROR", details)


class RAGError(ClassroomAssistantError):
    """Raised when document indexing or retrieval fails."""

    def __init__(self, message: str, document_id: Optional[str] = None) -> None:
        details = {"document_id": document_id} if document_id else {}
        super().__init__(message, "RAG_ERROR", details)


class EmbeddingError(RAGError):
    """Raised when there's an embedding generation issue."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.error_code = "EMBEDDING_ERROR"


class ProviderError(EmbeddingError):
    """Raised when a remote embeddings API call fails or returns an unusable body.

    ``status_code`` is ``None`` when the request never produced an HTTP
    response (connection error, timeout).
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
        provider: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.error_code = "PROVIDER_ERROR"
        self.status_code = status_code
        self.body = body
        self.provider = provider
        self.details = {
            "status_code": status_code,
            "body": body,
            "provider": provider,
        }

    def __str__(self) -> str:
        """String representation including the HTTP status."""
        status = self.status_code if self.status_code is not None else "no response"
        return f"{self.message} [status: {status}] (code: {self.error_code})"
