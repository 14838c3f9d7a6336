class ShoalartError(Exception):
    """Base class for errors raised by shoalart."""


class FormatError(ShoalartError, ValueError):
    """A charset or art file has a bad header or a damaged payload."""


class InputError(ShoalartError, ValueError):
    """An input or output path (or argument) cannot be used."""


class SkippedItem(ShoalartError):
    """A single item of a batch was skipped; the batch carries on."""

    def __init__(self, item, reason: str):
        super().__init__(f"{item!r}: {reason}")
        self.item = item
        self.reason = reason
