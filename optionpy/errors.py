from __future__ import annotations


class OptionError(Exception):
    pass


class IllegalConstruction(OptionError, TypeError):
    def __init__(self, message: str = "Option must be an instance of Some or Nothing"):
        super().__init__(message)


class UnwrapOnAbsent(OptionError, ValueError):
    def __init__(self, message: str = "tried to unwrap on Nothing"):
        super().__init__(message)
