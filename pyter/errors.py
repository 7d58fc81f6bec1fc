"""
error taxonomy. each class also derives from the builtin a python caller
would already be catching, so `except ValueError` style code keeps working.
"""


class PyterError(Exception):
    """base class for every error raised by pyter"""
    pass


class InvalidArgument(PyterError, TypeError):
    """wrong type or shape, e.g. a non-iterable where an iterable is required"""
    pass


class OutOfRange(PyterError, ValueError, IndexError):
    """negative width or count, zero step, index outside bounds, empty range"""
    pass


class Exhausted(PyterError, StopIteration):
    """advancing a finished iterator without a default"""
    pass


class Immutable(PyterError, TypeError):
    """mutating a frozen container"""
    pass


class NotFound(PyterError, KeyError, ValueError):
    """value or key lookup miss"""
    # keyerror would otherwise repr() the message
    __str__ = Exception.__str__
