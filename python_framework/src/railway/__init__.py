"""
Railway-Oriented Programming (ROP) primitives.

Fallible operations return a Result instead of raising:

    from railway import Result, ErrorCode

    def require(attributes: dict[str, str], key: str) -> Result[str]:
        return Result.from_optional(attributes.get(key), f"missing {key} attribute")

    result = require(attributes, "subject").map(str.upper)
"""

from railway.result import Result, Success, Failure
from railway.failure import ErrorCode, FailureDescription
from railway.assertions import ResultAssertions

__all__ = [
    "Result",
    "Success",
    "Failure",
    "ErrorCode",
    "FailureDescription",
    "ResultAssertions",
]

__version__ = "1.0.0"
