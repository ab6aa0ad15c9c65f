"""Enum conversion utilities"""

from enum import Enum
from typing import TypeVar, Type, List, Any

# Generic type for any Enum subclass
E = TypeVar("E", bound=Enum)


class EnumHelper:
    """
    Utility class for working with Enums:
    - Parse config strings ("clamp", "EXTEND") into enum members
    - Convert members back to names for JSON output
    - List valid names for error messages
    """

    @staticmethod
    def to_enum(enum_class: Type[E], value: Any) -> E:
        """
        Convert a member or its (case-insensitive) name to an enum member

        Raises:
            ValueError: unknown name (message lists the valid ones)
            TypeError: value is neither a member nor a string
        """
        if isinstance(value, enum_class):
            return value
        if isinstance(value, str):
            try:
                return enum_class[value.strip().upper()]
            except KeyError:
                valid = ", ".join(EnumHelper.list_names(enum_class, lowercase=True))
                raise ValueError(
                    f"Invalid {enum_class.__name__} value '{value}' (expected one of: {valid})"
                ) from None
        raise TypeError(f"Expected str or {enum_class.__name__}, got {type(value).__name__}")

    @staticmethod
    def to_name(value: Any, lowercase: bool = False) -> str:
        """Convert enum instance to string name"""
        if isinstance(value, Enum):
            return value.name.lower() if lowercase else value.name
        return str(value)

    @staticmethod
    def list_names(enum_class: Type[E], lowercase: bool = False) -> List[str]:
        """
        List all Enum member names.

        Args:
            enum_class: Enum class to inspect
            lowercase: Return lowercase names

        Returns:
            List of member names (strings)
        """
        if not issubclass(enum_class, Enum):
            raise TypeError(f"{enum_class} is not an Enum class")

        if lowercase:
            return [member.name.lower() for member in enum_class]
        return [member.name for member in enum_class]
