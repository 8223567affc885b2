"""BizBuz exception hierarchy.

All service-specific exceptions inherit from :class:`BizBuzError`.
"""

from __future__ import annotations


class BizBuzError(Exception):
    """Base exception for all BizBuz errors."""


class ProfileNotFoundError(BizBuzError):
    """Raised when a profile cannot be resolved for an identifier."""

    def __init__(self, identifier: str) -> None:
        super().__init__("Profile not found")
        self.identifier = identifier


class ProfileFormatError(BizBuzError):
    """Raised when the profile service returns a payload that is not a profile."""


class QRCodeError(BizBuzError):
    """Raised when a QR code cannot be rasterized."""
