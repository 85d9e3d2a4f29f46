class RoundError(Exception):
    """Base class for failures that abort a single round."""


class MissingMapAsset(RoundError):
    """No map template, or the cloned map has no pad container."""
