"""Discovery feed rendering of identity provider metadata."""

from .feed import DiscoFeedCollectionSerializer

__all__ = ["DiscoFeedCollectionSerializer"]
