"""Core enums package.

Usage:
    from valobs.core.enums import ErrorCode, Environment
"""

from valobs.core.enums.environment import Environment
from valobs.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
