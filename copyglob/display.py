'''Progress reporting for copy passes. copy_glob_with() tells its display
when a pass starts, every time it creates a directory or copies a file, and
when the pass is done. Failures are raised, not reported here.'''

import collections
import sys

MKDIR = 'mkdir'
COPY = 'copy'
FLATTEN = 'flatten'

ACTIONS = (MKDIR, COPY, FLATTEN)


class QuietDisplay:
    '''Reports nothing. This is what you get unless you ask for output.'''

    def __init__(self, output=None):
        self.output = output or sys.stdout

    def pass_started(self, glob_str):
        pass

    def entry_copied(self, action, relpath, dest):
        pass

    def pass_finished(self, glob_str):
        pass


class VerboseDisplay(QuietDisplay):
    '''A header naming the glob, one line per entry, and a tally at the end.
    Meant for build logs.'''

    def __init__(self, output=None):
        super().__init__(output)
        self.tally = collections.Counter()

    def _print(self, line):
        print(line, file=self.output)

    def pass_started(self, glob_str):
        self.tally.clear()
        self._print('copyglob {}'.format(glob_str))

    def entry_copied(self, action, relpath, dest):
        self.tally[action] += 1
        if dest == relpath:
            self._print('  {} {}'.format(action, relpath))
        else:
            self._print('  {} {} -> {}'.format(action, relpath, dest))

    def pass_finished(self, glob_str):
        counts = ['{} {}'.format(self.tally[action], action)
                  for action in ACTIONS if self.tally[action]]
        self._print('done {}: {}'.format(
            glob_str, ', '.join(counts) or 'nothing copied'))
