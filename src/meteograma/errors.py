"""Error types raised by the meteogram pipeline."""


class MeteogramError(Exception):
    """Base error for every failure the pipeline reports."""


class NetworkError(MeteogramError):
    """An HTTP request could not be completed."""


class DeserializationError(MeteogramError):
    """The autocomplete response did not have the expected shape."""


class NoResultsError(MeteogramError):
    """The city lookup returned no candidates."""


class InvalidSelectionError(MeteogramError):
    """The selected index is not a valid candidate."""


class MeteogramNotFoundError(MeteogramError):
    """The forecast page has no meteogram image."""


class OutputIOError(MeteogramError):
    """Writing the meteogram to disk failed."""


class LaunchError(MeteogramError):
    """The default image viewer could not be started."""
