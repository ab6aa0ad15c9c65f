"""
Managers for configuration
"""

from .config_manager import ConfigManager, validate_props

__all__ = ['ConfigManager', 'validate_props']
