"""Turn source trees into comment-free, paginated code listings."""

__version__ = "0.1.0"
