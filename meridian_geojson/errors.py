"""
GeoJSON Errors
==============

Exceptions raised while constructing or decoding geometry values.
"""


class GeoJsonError(ValueError):
    """Raised when a geometry value violates a construction invariant or
    when GeoJSON input cannot be decoded."""
    pass
