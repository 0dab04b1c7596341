import os


def makedirs(path):
    '''Creates path and any missing parents. An existing directory is left
    alone, whatever its permissions.'''
    path = os.fspath(path)
    if not os.path.isdir(path):
        os.makedirs(path, exist_ok=True)


def to_posix(path):
    '''Render a str or path-like with forward slashes, whatever the platform
    separator is.'''
    path = os.fspath(path)
    if os.sep != '/':
        path = path.replace(os.sep, '/')
    if os.altsep and os.altsep != '/':
        path = path.replace(os.altsep, '/')
    return path
