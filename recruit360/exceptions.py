# exceptions.py
"""Error types raised by the dataset sources and the geocoder."""


class RecruitError(Exception):
    """Base class for errors raised by recruit360."""


class DatasetUnavailableError(RecruitError):
    """Neither the primary store nor the bundled snapshot could be read."""


class GeocodeError(RecruitError):
    """The geocoding service failed or returned something unusable."""


class LocationNotFoundError(GeocodeError):
    """The geocoding service had no match for the query."""
