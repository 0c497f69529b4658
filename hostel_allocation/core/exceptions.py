"""
Custom Exceptions for the Hostel Allocation Service

This module defines the exception classes raised by the allocation
workflow, the stores and the demo authentication layer. Each exception
carries an error code and the HTTP status the API answers with.
"""

from typing import Any, Dict, List, Optional
from enum import Enum


class ErrorCode(str, Enum):
    """Standard error codes for the application"""
    # General errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"

    # Authentication & Authorization
    AUTHENTICATION_FAILED = "AUTHENTICATION_FAILED"
    AUTHORIZATION_FAILED = "AUTHORIZATION_FAILED"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    DUPLICATE_ENTRY = "DUPLICATE_ENTRY"

    # Business logic errors
    ROOM_UNAVAILABLE = "ROOM_UNAVAILABLE"

    # Specific lookups
    APPLICATION_NOT_FOUND = "APPLICATION_NOT_FOUND"
    ROOM_NOT_FOUND = "ROOM_NOT_FOUND"


class BaseAppException(Exception):
    """
    Base exception class for all application exceptions.

    Provides consistent error handling across the application with
    structured error information.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format"""
        return {
            "error": {
                "message": self.message,
                "code": self.error_code.value,
                "details": self.details,
                "type": self.__class__.__name__
            }
        }

    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.message}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message='{self.message}', error_code='{self.error_code.value}')"


# ========================================
# Validation Exceptions
# ========================================

class ValidationError(BaseAppException):
    """Exception raised when data validation fails"""

    def __init__(
        self,
        message: str = "Validation failed",
        field_errors: Optional[Dict[str, List[str]]] = None,
        error_code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        status_code: int = 422
    ):
        self.field_errors = field_errors or {}
        details = {"field_errors": self.field_errors} if self.field_errors else {}
        super().__init__(message, error_code, details, status_code)


class DuplicateRoomNumberError(ValidationError):
    """Exception raised when a room number is already in the inventory"""

    def __init__(self, room_number: str):
        super().__init__(
            f"Room number '{room_number}' already exists",
            field_errors={"number": ["Room number must be unique"]},
            error_code=ErrorCode.DUPLICATE_ENTRY,
            status_code=409,
        )
        self.room_number = room_number


class DuplicateEntryError(BaseAppException):
    """Exception raised when a unique record already exists"""

    def __init__(self, message: str = "Entry already exists", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.DUPLICATE_ENTRY, details, 409)


# ========================================
# Resource Not Found Exceptions
# ========================================

class NotFoundError(BaseAppException):
    """Exception raised when a requested resource is not found"""

    def __init__(
        self,
        resource_type: str = "Resource",
        resource_id: Optional[str] = None,
        message: Optional[str] = None
    ):
        if not message:
            message = f"{resource_type} not found"
            if resource_id:
                message += f" (ID: {resource_id})"

        details = {
            "resource_type": resource_type,
            "resource_id": resource_id
        }
        self.resource_id = resource_id
        super().__init__(message, ErrorCode.RESOURCE_NOT_FOUND, details, 404)


class ApplicationNotFoundError(NotFoundError):
    """Exception raised when an application is not found"""

    def __init__(self, application_id: Optional[str] = None):
        super().__init__("Application", application_id)
        self.error_code = ErrorCode.APPLICATION_NOT_FOUND


class RoomNotFoundError(NotFoundError):
    """Exception raised when a room is not found"""

    def __init__(self, room_id: Optional[str] = None):
        super().__init__("Room", room_id)
        self.error_code = ErrorCode.ROOM_NOT_FOUND


# ========================================
# Business Logic Exceptions
# ========================================

class NoMatchingRoomError(BaseAppException):
    """
    Exception raised when an approval names no compatible available room.

    Raised both when the application's type/block has no available room
    at all and when the chosen room number is not one of the candidates.
    """

    def __init__(
        self,
        application_id: str,
        room_number: Optional[str] = None,
        candidates: Optional[List[str]] = None,
        message: Optional[str] = None
    ):
        candidates = candidates or []
        if not message:
            if not candidates:
                message = "No available room matches the requested type and block"
            else:
                message = f"Room '{room_number}' is not available for this application"
        details = {
            "application_id": application_id,
            "room_number": room_number,
            "available_rooms": candidates,
        }
        self.application_id = application_id
        self.room_number = room_number
        super().__init__(message, ErrorCode.ROOM_UNAVAILABLE, details, 409)


# ========================================
# Authentication Exceptions
# ========================================

class AuthenticationError(BaseAppException):
    """Exception raised when authentication fails"""

    def __init__(self, message: str = "Authentication failed"):
        super().__init__(message, ErrorCode.AUTHENTICATION_FAILED, None, 401)


class AuthorizationError(BaseAppException):
    """Exception raised when the user lacks the required role"""

    def __init__(self, message: str = "Insufficient permissions", required_role: Optional[str] = None):
        details = {"required_role": required_role} if required_role else {}
        super().__init__(message, ErrorCode.AUTHORIZATION_FAILED, details, 403)


__all__ = [
    "ErrorCode",
    "BaseAppException",
    "ValidationError",
    "DuplicateRoomNumberError",
    "DuplicateEntryError",
    "NotFoundError",
    "ApplicationNotFoundError",
    "RoomNotFoundError",
    "NoMatchingRoomError",
    "AuthenticationError",
    "AuthorizationError",
]
