"""
Utility functions for the stars animation engine
"""

from .enum_helper import EnumHelper
from .logger import get_logger, get_category_logger, configure_logger

__all__ = [
    'EnumHelper',
    'get_logger',
    'get_category_logger',
    'configure_logger',
]
