"""Exception hierarchy for confmap."""


class ConfmapError(Exception):
    """Base class for all confmap errors."""


class DocumentLoadError(ConfmapError):
    """A document could not be turned into a value."""


class UnsupportedFileTypeError(DocumentLoadError):
    """The file suffix is not one of the supported document formats."""

    def __init__(self, filename: str) -> None:
        super().__init__(f"Unsupported file type: {filename!r}")
        self.filename = filename


class DocumentParseError(DocumentLoadError):
    """The document text is not valid YAML/JSON."""

    def __init__(self, filename: str, reason: str) -> None:
        super().__init__(f"Error parsing {filename!r}: {reason}")
        self.filename = filename
        self.reason = reason
