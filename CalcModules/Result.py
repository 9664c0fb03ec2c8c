# Result.py
"""Outcome of a calculation step: either Success(value) or Failure(reason)."""

from . import error as E


class Result:
    """Base class; use Success or Failure."""

    successful = False
    value = None
    reason = None
    code = None

    def unwrap(self):
        """Return the value or raise the MathError subclass matching the failure code."""
        if self.successful:
            return self.value
        raise E.error_class(self.code)(self.reason, code=self.code)


class Success(Result):
    successful = True

    def __init__(self, value):
        self.value = value

    def __eq__(self, other):
        return isinstance(other, Success) and other.value == self.value

    def __repr__(self):
        return f"Success({self.value!r})"


class Failure(Result):

    def __init__(self, reason, code="9999"):
        self.reason = reason
        self.code = code

    def __eq__(self, other):
        return isinstance(other, Failure) and (other.reason, other.code) == (self.reason, self.code)

    def __repr__(self):
        return f"Failure({self.reason!r}, code={self.code!r})"
