import collections

from . import glob
from . import paths

# Anything inside the conventional build output directory. Without this a
# copy into target/ would pick up its own output on the next run.
DEFAULT_EXCLUDES = ('**/target/*',)

CopyOptions = collections.namedtuple('CopyOptions', ['root', 'exclude'])


class CopyOptionsBuilder:
    '''Collects the root and the exclude globs for a copy. Nothing is compiled
    until build(), so a bad glob is reported there.'''

    def __init__(self, root=None):
        if root is None:
            root = paths.get_root_path()
        self.root = root
        self.excludes = list(DEFAULT_EXCLUDES)

    def set_root_path(self, root):
        self.root = root
        return self

    def add_exclude(self, glob_str):
        self.excludes.append(glob_str)
        return self

    def clear_excludes(self):
        self.excludes.clear()
        return self

    def build(self):
        return CopyOptions(
            root=str(self.root),
            exclude=glob.build_glob_set(self.excludes))
