class GhStatsError(Exception):
    """Base class for errors that abort a ghstats run."""


class ApiError(GhStatsError):
    pass


class AuthError(GhStatsError):
    pass


class NetworkError(GhStatsError):
    pass


class RateLimitError(GhStatsError):
    pass


class RepoNotFoundError(GhStatsError):
    pass


class PayloadError(GhStatsError):
    """A raw API record is missing a field the statistics are keyed on."""


class ConfigError(GhStatsError):
    pass
