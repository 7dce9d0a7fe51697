class IterAlgebraError(Exception):
    """Base class of every error raised by iteralgebra."""


class InvalidConfigurationError(IterAlgebraError, ValueError):
    """An adaptor was constructed with arguments it cannot honor, e.g. a non-positive `islice` step."""


class CursorExhaustedError(IterAlgebraError, RuntimeError):
    """A cursor already sitting at its end was dereferenced."""


class StaleGroupError(IterAlgebraError, RuntimeError):
    """A `groupby` group was read after its parent cursor moved past it."""
