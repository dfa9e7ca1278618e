"""Error type shared by every extraction stage."""


class ExtractError(Exception):
    """A fatal extraction failure; the CLI reports it and exits non-zero."""
