"""Purchase Rejection Reason Enum"""

from enum import StrEnum


class PurchaseRejectionReason(StrEnum):
    INVALID_ACCOUNT = 'invalid_account'
    NO_REQUESTS = 'no_requests'
    INVALID_REQUEST = 'invalid_request'
    LIMIT_EXCEEDED = 'limit_exceeded'
    MISSING_ADULT = 'missing_adult'
    INFANT_RATIO_EXCEEDED = 'infant_ratio_exceeded'
