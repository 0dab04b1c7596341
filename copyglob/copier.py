'''The copy pass: walk a root directory, pick the entries that match a glob
and none of the excludes, and recreate them under an output directory at the
same relative paths.

A file keeps its relative path only if its parent directory already exists
in the output. Otherwise it's copied to the top of the output under its
basename. Since the walk handles a directory's subdirectories before its
files, "**/for_copy/*" keeps the layout of a for_copy/ that has a matching
subdirectory, but flattens one that holds only files.

A pass is a single synchronous walk. Nothing is locked, so if the source tree
changes while we're walking it, the results are whatever os.walk() and lstat()
happened to see. The first filesystem error aborts the pass, and anything
copied before that stays where it is.'''

import collections
import os
import shutil
import stat

from . import compat
from . import display as display_module
from .error import CopyIOError, io_errors
from . import glob
from .options import CopyOptionsBuilder

FILE = 'file'
DIRECTORY = 'directory'
OTHER = 'other'

Entry = collections.namedtuple('Entry', ['path', 'relpath', 'kind'])


def copy_glob(glob_str, output_dir, *, on_visit=None, display=None):
    '''Copies with the default options: rooted at the project root, skipping
    anything inside target/.'''
    options = CopyOptionsBuilder().build()
    copy_glob_with(glob_str, output_dir, options, on_visit=on_visit,
                   display=display)


def copy_glob_with(glob_str, output_dir, options, *, on_visit=None,
                   display=None):
    '''on_visit, if given, is called with the path of every entry the walk
    visits, whether or not it gets copied. See paths.rerun_if_changed().'''
    matcher = glob.compile_glob(glob_str)
    output_dir = os.fspath(output_dir)
    if display is None:
        display = display_module.QuietDisplay()

    with io_errors('create output directory', output_dir):
        compat.makedirs(output_dir)

    display.pass_started(glob_str)
    for entry in walk(options.root):
        if on_visit is not None:
            on_visit(entry.path)
        # Excludes win over the glob.
        if (options.exclude.is_match(entry.relpath)
                or not matcher.matches(entry.relpath)):
            continue
        _copy_entry(entry, output_dir, display)
    display.pass_finished(glob_str)


def _copy_entry(entry, output_dir, display):
    target = os.path.join(output_dir, entry.relpath)
    if entry.kind == DIRECTORY:
        with io_errors('create directory', target):
            compat.makedirs(target)
        display.entry_copied(display_module.MKDIR, entry.relpath,
                             entry.relpath)
    elif entry.kind == FILE:
        if os.path.isdir(os.path.dirname(target)):
            _copy_file(entry.path, target)
            display.entry_copied(display_module.COPY, entry.relpath,
                                 entry.relpath)
        else:
            basename = os.path.basename(entry.path)
            _copy_file(entry.path, os.path.join(output_dir, basename))
            display.entry_copied(display_module.FLATTEN, entry.relpath,
                                 basename)
    # Symlinks, sockets, fifos and devices are skipped.


def _copy_file(source, dest):
    # Contents and permission bits, overwriting whatever is at dest.
    with io_errors('copy', source):
        shutil.copyfile(source, dest)
        shutil.copymode(source, dest)


def relative_path(root, path):
    '''Strips the root prefix from a path that the walk produced under it.
    Both separator styles get trimmed, so this works for Windows paths too.'''
    if not path.startswith(root):
        raise ValueError('{!r} is not under {!r}'.format(path, root))
    return path[len(root):].lstrip('/\\')


def entry_kind(path):
    with io_errors('read metadata of', path):
        mode = os.lstat(path).st_mode
    if stat.S_ISDIR(mode):
        return DIRECTORY
    elif stat.S_ISREG(mode):
        return FILE
    return OTHER


def walk(root):
    '''Yields an Entry for root itself and then for everything below it,
    parents before children. Within a directory, subdirectories come first
    and then files, each in sorted order. Symlinked directories are reported
    but not descended into.'''
    root = os.fspath(root)

    def raise_walk_error(error):
        raise CopyIOError('read directory', error.filename, error) from error

    yield Entry(root, '', entry_kind(root))
    for dirpath, dirnames, filenames in os.walk(root,
                                                onerror=raise_walk_error):
        # Sorting in place also fixes the order os.walk() descends in.
        dirnames.sort()
        for name in dirnames + sorted(filenames):
            path = os.path.join(dirpath, name)
            yield Entry(path, relative_path(root, path), entry_kind(path))
