class PageOptsError(Exception):
    """Base error for pageopts."""


class SettingsError(PageOptsError):
    """Settings file is unreadable or has the wrong shape."""
