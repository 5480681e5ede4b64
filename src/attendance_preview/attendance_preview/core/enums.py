from __future__ import annotations

from enum import Enum


class MissedCheckoutStatus(str, Enum):
    """Trạng thái duyệt báo quên check-out."""

    NOT_APPLICABLE = "NOT_APPLICABLE"
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
