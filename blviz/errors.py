"""
Exceptions raised by the data pipeline.
"""


class BlvizError(Exception):
    """Base class for errors surfaced to the user."""
    pass


class LoadError(BlvizError):
    """The dataset resource could not be read (file system or network)."""

    def __init__(self, source, reason):
        self.source = str(source)
        self.reason = str(reason)
        super().__init__(f"Error loading data from {self.source}: {self.reason}")


class EmptyDatasetError(BlvizError):
    """The resource was read but holds no usable data rows."""
    pass
