from __future__ import annotations


class GanitaError(ValueError):
    """Base class for input-validation failures raised by the math helpers."""


class DimensionMismatchError(GanitaError):
    pass


class ZeroVectorError(GanitaError):
    pass


class SeriesLengthError(GanitaError):
    pass


class EmptySeriesError(GanitaError):
    pass
