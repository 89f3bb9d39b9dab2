"""
Exceptions raised while building an availability report.
"""


class AvailabilityReportError(Exception):
    """Base class for report construction errors."""


class InvalidTimestamp(AvailabilityReportError, ValueError):
    """The anchor timestamp in the metadata cannot be parsed."""

    def __init__(self, value, reason: str = "") -> None:
        message = f"Invalid anchor timestamp: {value!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.value = value


class TopLevelFetchFailure(AvailabilityReportError):
    """The package list or the metadata record could not be retrieved."""


class PackageDataAbsent(AvailabilityReportError):
    """A single package record is missing or malformed."""

    def __init__(self, target: str, package: str, reason: str = "") -> None:
        message = f"No data for {package} on {target}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.target = target
        self.package = package
