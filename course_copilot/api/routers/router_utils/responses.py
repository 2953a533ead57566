"""
Response construction utilities.

Dependencies: course_copilot.models.common
System role: Uniform success envelope for all endpoints
"""

from typing import Any

from course_copilot.models.common import SuccessResponse


def success(data: Any) -> SuccessResponse:
    """
    Wrap a payload in the success envelope.

    Args:
        data: Response payload

    Returns:
        SuccessResponse: {"success": true, "data": data}
    """
    return SuccessResponse(data=data)
