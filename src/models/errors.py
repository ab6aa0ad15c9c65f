"""
Engine errors

Every error carries a machine-readable code, a human-readable message
and a details dict with the offending values.
"""

from typing import Any, Dict, List, Optional, Sequence


class EngineError(Exception):
    """Base class for animation engine errors"""
    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None
    ):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "message": self.message, "details": self.details}


class ConfigValidationError(EngineError):
    """Composition props are malformed, missing or unreadable"""
    def __init__(
        self,
        errors: List[Dict[str, Any]],
        message: str = "Composition props validation failed",
        code: str = "CONFIG_VALIDATION_FAILED"
    ):
        self.errors = errors
        super().__init__(
            code=code,
            message=message,
            details={"error_count": len(errors), "errors": errors}
        )


class InvalidRangeError(EngineError):
    """Interpolation input range is not usable"""
    def __init__(self, reason: str, input_range: Sequence[float], output_range: Sequence[float]):
        super().__init__(
            code="INVALID_RANGE",
            message=f"Invalid interpolation range: {reason}",
            details={
                "input_range": list(input_range),
                "output_range": list(output_range),
            }
        )
