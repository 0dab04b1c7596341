from contextlib import contextmanager


class CopyGlobError(Exception):
    '''Base class for the errors copyglob raises itself. The message is
    formatted from its arguments when the error is built, and str() gives it
    back unchanged.'''

    def __init__(self, message, *args):
        self.message = message.format(*args) if args else message
        super().__init__(self.message)

    def __str__(self):
        return self.message


class CopyIOError(CopyGlobError):
    '''Any filesystem failure during a copy pass. The original OSError is
    chained as __cause__.'''

    def __init__(self, action, path, os_error):
        reason = os_error.strerror or os_error
        super().__init__('Unable to {} "{}": {}', action, path, reason)
        self.path = path


@contextmanager
def io_errors(action, path):
    '''Turns an OSError from inside the block into a CopyIOError naming what
    we were doing and to which path.'''
    try:
        yield
    except OSError as e:
        raise CopyIOError(action, path, e) from e
