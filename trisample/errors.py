class TriangleSampleError(ValueError):
    """Base for all trisample exceptions."""

    pass


class InvalidDimension(TriangleSampleError):
    """Vertices of mismatched length, or fewer than 2 coordinates."""

    pass


class InvalidParameter(TriangleSampleError):
    """Bad step count or point count."""

    pass
