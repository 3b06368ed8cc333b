"""Exceptions for the tztemplate library."""


class TemplateError(Exception):
    """Base exception for all tztemplate errors."""


class TooManyZonesError(TemplateError):
    """Raised when a template has more zones than a TZif file can address."""

    def __init__(self, count: int) -> None:
        """Initialize TooManyZonesError."""
        super().__init__(f"too many zones ({count}), max is 254")
        self.count = count


class MissingZoneInformationError(TemplateError):
    """Raised when a template has neither zones nor an extend rule."""

    def __init__(self) -> None:
        """Initialize MissingZoneInformationError."""
        super().__init__("no zone information: zones or an extend rule is required")


class TooManyTransitionsError(TemplateError):
    """Raised when the transitions do not fit the 32-bit transition count."""

    def __init__(self, count: int) -> None:
        """Initialize TooManyTransitionsError."""
        super().__init__(f"too many transitions ({count})")
        self.count = count


class UnorderedTransitionsError(TemplateError):
    """Raised when transition start times are not strictly increasing."""

    def __init__(self, index: int) -> None:
        """Initialize UnorderedTransitionsError."""
        super().__init__(
            f"transitions must be strictly increasing (transition {index})"
        )
        self.index = index


class ZoneIndexError(TemplateError):
    """Raised when a transition references a zone that does not exist."""

    def __init__(self, index: int, zone_index: int) -> None:
        """Initialize ZoneIndexError."""
        super().__init__(
            f"transition zone index out of range (transition {index}, zone {zone_index})"
        )
        self.index = index
        self.zone_index = zone_index


class DesignationsTooLongError(TemplateError):
    """Raised when the zone names do not fit the designation table."""

    def __init__(self, charcnt: int) -> None:
        """Initialize DesignationsTooLongError."""
        super().__init__(f"designations too long (charcnt={charcnt}), max is 255")
        self.charcnt = charcnt


class InvalidDataError(TemplateError):
    """Raised when decoding malformed or truncated TZif data."""

    def __init__(self, message: str) -> None:
        """Initialize InvalidDataError."""
        super().__init__(f"invalid data: {message}")


class UnsupportedVersionError(TemplateError):
    """Raised when decoding a TZif version other than 1, 2 or 3."""

    def __init__(self, version: bytes) -> None:
        """Initialize UnsupportedVersionError."""
        super().__init__(f"unsupported version {version!r}")
        self.version = version


class UnsupportedIndicatorValuesError(TemplateError):
    """Raised when standard/wall or UT/local indicators are not all UT based.

    Templates always express transition times as UT instants, so only data
    with every indicator set to 1 can be represented.
    """

    def __init__(self) -> None:
        """Initialize UnsupportedIndicatorValuesError."""
        super().__init__("unsupported isstd/isut indicator values")


class TimezoneInfoError(TemplateError):
    """Raised when encoded template data can't be loaded as a time zone."""
