from pathlib import PurePosixPath
import re

from . import compat
from .error import CopyGlobError


def _canonicalize(glob):
    if not glob:
        raise InvalidPatternError(glob, 'The glob is empty.')
    # Duplicate and trailing slashes get dropped, but a leading slash stays.
    # PurePosixPath keeps a leading "//", so collapse that by hand.
    canonical = str(PurePosixPath(glob))
    if canonical.startswith('//'):
        canonical = '/' + canonical.lstrip('/')
    return canonical


def _read_class_char(glob, component, i):
    '''Returns the literal character at index i of a character class, and
    the index after it. Backslash escapes the next character.'''
    if component[i] == '\\':
        if i + 1 == len(component):
            raise InvalidPatternError(glob, 'Dangling escape.')
        return component[i + 1], i + 2
    return component[i], i + 1


def _class_to_regex(glob, component, start):
    '''Translates the character class that opens at index start. Returns the
    regex and the index just past the closing bracket.'''
    i = start + 1
    negated = i < len(component) and component[i] in '!^'
    if negated:
        i += 1
    items = []
    # A ] right after the opening bracket (or the negation) is a literal.
    if i < len(component) and component[i] == ']':
        items.append(re.escape(']'))
        i += 1
    while True:
        if i >= len(component):
            raise InvalidPatternError(glob, 'Unclosed character class.')
        if component[i] == ']':
            break
        first, i = _read_class_char(glob, component, i)
        is_range = (i + 1 < len(component) and component[i] == '-' and
                    component[i + 1] != ']')
        if is_range:
            last, i = _read_class_char(glob, component, i + 1)
            if first > last:
                raise InvalidPatternError(
                    glob, 'Invalid range "{}-{}" in character class.'.format(
                        first, last))
            items.append('{}-{}'.format(re.escape(first), re.escape(last)))
        else:
            items.append(re.escape(first))
    # Character classes never match the separator.
    if negated:
        return '[^/' + ''.join(items) + ']', i + 1
    return '[' + ''.join(items) + ']', i + 1


def _component_to_regex(glob, component):
    if component == '*':
        # A lone * may not match empty.
        return r'[^/]+'
    regex = ''
    i = 0
    while i < len(component):
        c = component[i]
        if c == '\\':
            if i + 1 == len(component):
                raise InvalidPatternError(glob, 'Dangling escape.')
            regex += re.escape(component[i + 1])
            i += 2
        elif c == '*':
            if i + 1 < len(component) and component[i + 1] == '*':
                raise InvalidPatternError(
                    glob, '** must be an entire path component.')
            # A * with other characters may match empty.
            regex += r'[^/]*'
            i += 1
        elif c == '?':
            regex += r'[^/]'
            i += 1
        elif c == '[':
            class_regex, i = _class_to_regex(glob, component, i)
            regex += class_regex
        else:
            regex += re.escape(c)
            i += 1
    return regex


def _glob_to_regex_body(glob):
    components = _canonicalize(glob).split('/')
    regex = ''
    for i, component in enumerate(components):
        is_last = i == len(components) - 1
        if component == '**':
            if is_last:
                # A trailing ** matches everything below, but not nothing.
                regex += r'[^/]+(?:/[^/]+)*'
            else:
                regex += r'(?:[^/]+/)*'
        else:
            regex += _component_to_regex(glob, component)
            # Add a trailing slash for every component except **.
            if not is_last:
                regex += '/'
    return regex


def glob_to_path_regex(glob):
    '''Supports *, **, ? and [...] classes. Backslashes escape the next
    character. As in pathlib, ** may not adjoin any characters other than
    slash. Because we're not talking to the actual filesystem, ** will match
    files as well as directories. Paths get canonicalized before they're
    converted, so duplicate and trailing slashes get dropped. You should make
    sure the other paths you try to match are in canonical (Posix) form as
    well.

    The regex matches whole paths only. Matcher additionally accepts anything
    below a matching path.'''
    # The final regex starts with ^ and ends with $ to force it to match the
    # whole path.
    return '^' + _glob_to_regex_body(glob) + '$'


class Matcher:
    '''A compiled glob. A path matches if it, or one of the directories
    leading up to it, matches the glob. So "**/target/*" matches
    "a/target/debug" and also everything inside it.'''

    def __init__(self, glob):
        self.glob = glob
        self.regex = glob_to_path_regex(glob)
        self._compiled = re.compile(
            _glob_to_regex_body(glob) + r'(?:/.*)?', re.DOTALL)

    def matches(self, path):
        return self._compiled.fullmatch(compat.to_posix(path)) is not None

    def __repr__(self):
        return 'Matcher({!r})'.format(self.glob)


class GlobSet:
    '''Matches a path if any of its globs do. An empty set matches
    nothing.'''

    def __init__(self, matchers):
        self.matchers = tuple(matchers)

    @property
    def globs(self):
        return tuple(m.glob for m in self.matchers)

    def is_match(self, path):
        path = compat.to_posix(path)
        return any(m.matches(path) for m in self.matchers)

    def __len__(self):
        return len(self.matchers)

    def __repr__(self):
        return 'GlobSet({!r})'.format(list(self.globs))


def compile_glob(glob):
    return Matcher(glob)


def build_glob_set(globs):
    return GlobSet(compile_glob(g) for g in globs)


class InvalidPatternError(CopyGlobError):
    def __init__(self, glob, message):
        super().__init__('Glob error in "{}": {}', glob, message)
        self.glob = glob
