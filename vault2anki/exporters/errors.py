"""Export errors."""


class ExportError(Exception):
    """Error when cards cannot be written to the output file."""

    pass
