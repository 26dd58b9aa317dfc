# tilezoom/core/errors.py
"""
Errors raised by the layout scheme. Both derive from ValueError since every
failure here is a rejected input.
"""


class InvalidLevelError(ValueError):
    """A zoom id below 1 was requested; the pyramid has no such level."""

    def __init__(self, zoom_id):
        self.zoom_id = zoom_id
        super().__init__(f"Tiling scheme does not have levels below 1 (got {zoom_id}).")


class DegenerateInputError(ValueError):
    """Cell size or sample distance cannot produce a zoom level."""
