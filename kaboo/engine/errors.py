"""Exceptions raised by the Kaboo engine."""


class KabooError(Exception):
    """Base class for engine errors."""


class InvalidArgumentError(KabooError, ValueError):
    """A call received input it cannot act on (blank name, wrong selection, ...)."""


class InvalidStateError(KabooError, RuntimeError):
    """A call was made in a phase that does not permit it."""


class NoActiveGameError(InvalidStateError):
    """A game action was invoked while no game is running."""
