"""User-agent based device detection."""

from __future__ import annotations

import re
from typing import Optional

__all__ = ["MOBILE_UA_RE", "is_mobile"]


MOBILE_UA_RE = re.compile(
    r"phone|pad|pod|iPhone|iPod|ios|iPad|Android|Mobile|BlackBerry|IEMobile|"
    r"MQQBrowser|JUC|Fennec|wOSBrowser|BrowserNG|WebOS|Symbian|Windows Phone",
    re.IGNORECASE,
)


def is_mobile(user_agent: Optional[str]) -> bool:
    """Return True if the user-agent string names a common mobile platform."""

    if not user_agent:
        return False
    return MOBILE_UA_RE.search(user_agent) is not None
