"""Exceptions raised by springplot."""


class SpringplotError(Exception):
    """Base class for all springplot errors."""


class InvalidParameter(SpringplotError, ValueError):
    """A shape parameter is outside its valid domain."""


class MissingAesthetic(SpringplotError, KeyError):
    """A required data column is absent."""

    def __str__(self) -> str:
        # KeyError quotes its message; show it plainly instead
        return str(self.args[0]) if self.args else ""
