"""Application exceptions."""


class GroupingsError(Exception):
    """Base class for groupings announcement errors."""


class InvalidAnnouncementError(GroupingsError):
    """Announcement entry is missing fields or has an unusable window."""


class GroupingsApiError(GroupingsError):
    """Upstream groupings API request failed or returned an unusable body."""
