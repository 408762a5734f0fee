"""Errors raised while fuzzing a computer."""


class FuzzingInvariantError(BaseException):
    """
    Raised when the fuzzer produced an inconsistent topology.

    Signals a bug in the fuzzer. Not an Exception subclass: ``except Exception``
    in the code under test does not catch it.
    """
    pass


class FuzzerConfigurationError(ValueError):
    """Raised when a fuzzer is configured with values it cannot satisfy."""
    pass


def ensure(condition: bool, message: str) -> None:
    """Aborts the fuzzing when an internal invariant does not hold."""
    if not condition:
        raise FuzzingInvariantError(f"Error during fuzzing! {message}")
