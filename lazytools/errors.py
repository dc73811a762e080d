import inspect
import threading

from tblib import pickling_support


class InvalidArgumentError(ValueError):
    """Raised when a length, count or repeat argument is invalid.

    The error is always raised when the iterator is created, before any
    value is produced.
    """


class EvaluationError(Exception):
    """Raised when evaluating an element fails."""


# wrapped errors keep their cause and traceback when pickled
pickling_support.install()


# Settings --------------------------------------------------------------------

EVALUATION_MODES = ('wrap', 'passthrough')


class ErrorConfig(threading.local):
    """Error propagation mode, each thread starts in `'wrap'` mode."""
    def __init__(self):
        super().__init__()
        self.evaluation = 'wrap'


error_config = ErrorConfig()


def seterr(evaluation=None):
    """Set how errors raised while iterating are propagated.

    The setting only affects the calling thread.

    Args:
        evaluation (Optional[str]): One of:

            - `'wrap'`: raise :class:`EvaluationError` with the original
              error as its cause, the message tells which iterator failed
              and where it was created.
            - `'passthrough'`: let the error propagate unchanged, might
              facilitate step-by-step debugging.
            - `None`: leave unchanged and return current setting.

    Returns:
        The setting value.
    """
    if evaluation is not None:
        if evaluation not in EVALUATION_MODES:
            raise ValueError("evaluation must be 'wrap' or 'passthrough'")
        error_config.evaluation = evaluation

    return error_config.evaluation


def reraise(error, item, owner, stack):
    """Propagate an error raised while iterating according to :func:`seterr`.

    Must be called from the `except` clause that caught `error`.
    """
    if error_config.evaluation == 'passthrough' \
            or isinstance(error, EvaluationError):
        raise error

    msg = "Failed to evaluate item {} in {} created at:\n{}".format(
        item, owner, stack)
    raise EvaluationError(msg) from error


# Helpers ---------------------------------------------------------------------

def format_stack(skip=2):
    """Describe the call stack of the code creating an iterator.

    The innermost `skip` frames are left out, by default this function and
    the factory calling it, so that the listing ends on the line of user
    code that created the iterator.
    """
    out = ""
    for frame in reversed(inspect.stack(context=1)[skip:]):
        out += "  File \"{}\", line {}, in {}\n".format(
            frame.filename, frame.lineno, frame.function)
        if frame.code_context:
            out += "    " + frame.code_context[0].strip() + "\n"

    return out
