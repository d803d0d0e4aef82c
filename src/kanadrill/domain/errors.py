"""Exception hierarchy for kana-drill."""


class KanaDrillError(Exception):
    """Base class for all errors raised by kana-drill."""


class AssetError(KanaDrillError):
    """A bundled vocabulary asset is missing or is not valid UTF-8 text."""


class DistributionError(KanaDrillError):
    """A weighted distribution could not be built from the weight table."""


class UnknownCommandError(KanaDrillError):
    """Input used the command prefix but named no known command."""
