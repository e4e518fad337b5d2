"""Processing components: DOM traversal, entity attribute filtering and the disco feed.

Sub-packages are imported explicitly (``mda_toolkit.core.mdattr`` etc.).
"""
