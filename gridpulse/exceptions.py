class GridPulseError(Exception): ...


class InvalidArgument(GridPulseError, ValueError): ...


class NotFound(GridPulseError, LookupError): ...


class MalformedSample(GridPulseError): ...


def require(
    condition: bool, message: str, exc: type[GridPulseError] = InvalidArgument
):
    """Raise the given exception if condition is False."""
    if not condition:
        raise exc(message)
