"""Provider routing by coordinate."""


def covers_location(latitude: float, longitude: float) -> bool:
    """Return True when the National Weather Service should serve the point.

    The box spans the continental US, Alaska, Hawaii and the territories. It
    is intentionally coarse: points near its edges may be routed to the
    wrong provider.
    """
    return 24.0 <= latitude <= 72.0 and -180.0 <= longitude <= -60.0
