"""Exception types raised by the evaluators."""


class InvalidArgumentError(ValueError):
    """Raised when an index precondition of an evaluator is violated.

    This signals a bug at the call site (for example ``m > l``); it is never
    recovered from internally.
    """
