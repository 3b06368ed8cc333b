"""A library for building time zones from templates.

A template describes a time zone as a list of zones, the transitions between
them and an optional POSIX TZ rule for the future. Templates are encoded as
TZif data (see rfc8536), which can be loaded by any TZif reader such as
python's zoneinfo or Go's time package, and TZif data can be decoded back
into a template.

```python
import datetime

from tztemplate import Template, Zone, encode, new_zoneinfo

template = Template(
    name="MyFixed",
    zones=[Zone(name="MyFixed", offset=datetime.timedelta(hours=2, minutes=23))],
)
tzdata = encode(template)
tz = new_zoneinfo(template)
```
"""

from .decoder import decode
from .encoder import encode
from .exceptions import (
    DesignationsTooLongError,
    InvalidDataError,
    MissingZoneInformationError,
    TemplateError,
    TimezoneInfoError,
    TooManyTransitionsError,
    TooManyZonesError,
    UnorderedTransitionsError,
    UnsupportedIndicatorValuesError,
    UnsupportedVersionError,
    ZoneIndexError,
)
from .model import Template, Transition, Zone
from .timezoneinfo import new_zoneinfo

__all__ = [
    "Template",
    "Transition",
    "Zone",
    "encode",
    "decode",
    "new_zoneinfo",
    "TemplateError",
    "TooManyZonesError",
    "MissingZoneInformationError",
    "TooManyTransitionsError",
    "UnorderedTransitionsError",
    "ZoneIndexError",
    "DesignationsTooLongError",
    "InvalidDataError",
    "UnsupportedVersionError",
    "UnsupportedIndicatorValuesError",
    "TimezoneInfoError",
]
