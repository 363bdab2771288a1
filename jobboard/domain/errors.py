"""Domain exceptions raised by the data-source chain."""


class SourceUnavailableError(Exception):
    """A data source has nothing to offer right now; the next tier should be tried."""


class JobLoadError(Exception):
    """Every data source in the chain failed or was unavailable."""
