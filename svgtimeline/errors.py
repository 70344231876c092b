"""Exceptions raised while building, validating or parsing a timeline."""


class TimelineError(Exception):
    """Base class for all svgtimeline errors."""


class ValidationError(TimelineError):
    """The timeline model cannot be rendered."""


class NegativeDurationError(ValidationError):
    pass


class InconsistentTimeModeError(ValidationError):
    pass


class NoPositiveDurationError(ValidationError):
    pass


class EmptyTimelineError(NoPositiveDurationError):
    pass


class ParseError(TimelineError):
    """A config file line could not be understood.

    ``lineno`` is 1-based.
    """

    def __init__(self, lineno, message):
        super().__init__("line %d: %s" % (lineno, message))
        self.lineno = lineno
        self.message = message
