"""Top-level package for the metadata aggregation toolkit.

The processing components live under :mod:`mda_toolkit.core`.  Hosts should
depend on the names re-exported here rather than importing internal modules
directly.
"""

from .core.models import DOMElementItem, ErrorStatus  # re-export for convenience

__all__: list[str] = [
    "DOMElementItem",
    "ErrorStatus",
]
