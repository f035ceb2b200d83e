class SequenceError(Exception):
    """base class for errors raised by seqy itself."""
    pass


class InvalidArgumentError(SequenceError, ValueError):
    """an operator was given an argument it cannot work with."""
    pass


class InvalidOperationError(SequenceError, ValueError):
    """a terminal operation's precondition does not hold for the sequence."""
    pass
