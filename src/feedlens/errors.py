"""Fatal error kinds raised while opening a feed."""


class FeedError(RuntimeError):
    """Base class for failures that prevent a feed from being opened."""


class MalformedDocument(FeedError):
    """Raised when the XML parser does not yield a usable tree."""


class UnknownFeedType(FeedError):
    """Raised when no dialect rule matches the document root."""


class ValidationFailed(FeedError):
    """Raised when strict mode is requested and the schema check rejects the document."""
