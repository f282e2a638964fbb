"""
Library exceptions.

Defines the exception hierarchy raised by boards and elements. Errors
raised by user-supplied field functions are never wrapped; they reach
the caller of the update unchanged.
"""

from typing import Any, Dict, Optional, Sequence


class FieldPlotError(Exception):
    """Base exception for fieldplot errors"""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidParametersError(FieldPlotError):
    """Raised when an element cannot be built from the given parents"""

    def __init__(self, element_type: str, parent_types: Sequence[str], reason: Optional[str] = None):
        types = ", ".join(f"'{t}'" for t in parent_types)
        message = f"Can't create {element_type} with parent types {types}."
        if reason:
            message = f"{message} {reason}"
        super().__init__(
            message=message,
            details={"element_type": element_type, "parent_types": list(parent_types)}
        )


class InvalidMeshError(FieldPlotError):
    """Raised when a sampling mesh resolves to an unusable grid"""

    def __init__(self, message: str, axis: Optional[str] = None, value: Any = None):
        details: Dict[str, Any] = {}
        if axis:
            details["axis"] = axis
        if value is not None:
            details["value"] = value
        super().__init__(message=message, details=details)


class InvalidAttributeError(FieldPlotError):
    """Raised when attribute values are rejected for an element type"""

    def __init__(self, element_type: str, error: str):
        super().__init__(
            message=f"Invalid attributes for '{element_type}': {error}",
            details={"element_type": element_type, "error": error}
        )


class UnknownElementTypeError(FieldPlotError):
    """Raised when no factory or defaults exist for an element type"""

    def __init__(self, element_type: str):
        super().__init__(
            message=f"Unknown element type '{element_type}'",
            details={"element_type": element_type}
        )


class InvalidBoardError(FieldPlotError):
    """Raised for degenerate board geometry"""

    def __init__(self, message: str, field: Optional[str] = None):
        details = {"field": field} if field else {}
        super().__init__(message=message, details=details)


class InvalidExpressionError(InvalidParametersError):
    """Raised when a field component expression cannot be compiled"""

    def __init__(self, expression: Any, error: str):
        FieldPlotError.__init__(
            self,
            message=f"Can't compile field expression '{expression}': {error}",
            details={"expression": str(expression), "error": error}
        )
