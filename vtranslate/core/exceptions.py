"""
Exception hierarchy for VTranslate.

Every failure that crosses a module boundary is one of these types, so the
session, the HTTP routes and the CLI can report it without inspecting
third-party exception classes.
"""

from __future__ import annotations
from typing import Optional, Dict, Any


class VTranslateError(Exception):
    """Base exception for all VTranslate errors."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        recoverable: bool = False,
        suggestion: Optional[str] = None
    ):
        """
        Initialize error.

        Args:
            message: Human-readable error message
            details: Additional error details
            recoverable: Whether the user can simply try again
            suggestion: Suggested fix or workaround
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.recoverable = recoverable
        self.suggestion = suggestion

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for JSON serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
            "recoverable": self.recoverable,
            "suggestion": self.suggestion
        }

    def __str__(self) -> str:
        return self.message


class TranslationFailure(VTranslateError):
    """Raised when a translation request fails or returns nothing usable."""

    def __init__(
        self,
        message: str,
        target_language: Optional[str] = None,
        backend: Optional[str] = None,
        original_error: Optional[Exception] = None
    ):
        details = {
            "target_language": target_language,
            "backend": backend,
            "original_error": str(original_error) if original_error else None
        }
        super().__init__(message, details, recoverable=True)
        self.target_language = target_language
        self.backend = backend
        self.original_error = original_error


class DetectionFailure(VTranslateError):
    """Raised when language detection fails or returns nothing usable."""

    def __init__(
        self,
        message: str,
        backend: Optional[str] = None,
        original_error: Optional[Exception] = None
    ):
        details = {
            "backend": backend,
            "original_error": str(original_error) if original_error else None
        }
        super().__init__(message, details, recoverable=True)
        self.backend = backend
        self.original_error = original_error


class PaymentIntentFailure(VTranslateError):
    """Raised when the payment intent or the customer upsert cannot be created."""

    def __init__(
        self,
        message: str,
        plan_id: Optional[str] = None,
        original_error: Optional[Exception] = None
    ):
        details = {
            "plan_id": plan_id,
            "original_error": str(original_error) if original_error else None
        }
        super().__init__(message, details, recoverable=True)
        self.plan_id = plan_id
        self.original_error = original_error


class CardConfirmationFailure(VTranslateError):
    """Raised when the processor declines or rejects a card confirmation."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        decline_code: Optional[str] = None
    ):
        details = {
            "code": code,
            "decline_code": decline_code
        }
        suggestion = "Check the card details or try a different card."
        super().__init__(message, details, recoverable=True, suggestion=suggestion)
        self.code = code
        self.decline_code = decline_code


class ConfigurationError(VTranslateError):
    """Raised when configuration is invalid or a required secret is missing."""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        env_var: Optional[str] = None
    ):
        details = {
            "config_key": config_key,
            "env_var": env_var
        }

        suggestion = None
        if env_var:
            suggestion = f"Set the {env_var} environment variable or add it to .env"
        elif config_key:
            suggestion = f"Check configuration for '{config_key}'"

        super().__init__(message, details, recoverable=False, suggestion=suggestion)
        self.config_key = config_key
        self.env_var = env_var
