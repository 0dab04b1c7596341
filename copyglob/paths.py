import os
import sys

from .error import CopyGlobError

ROOT_ENV_VAR = 'COPYGLOB_ROOT'
PROFILE_ENV_VAR = 'COPYGLOB_PROFILE'

# Files that mark the top of a Python project, in order of preference at any
# one level of the tree.
PROJECT_FILE_NAMES = ('pyproject.toml', 'setup.py')

TARGET_DIR_NAME = 'target'
PROFILES = ('debug', 'release')
DEFAULT_PROFILE = 'debug'


def find_project_file(start_dir, basenames):
    '''Walk up the directory tree until we find a file with one of the given
    names.'''
    prefix = os.path.abspath(start_dir)
    while True:
        for basename in basenames:
            candidate = os.path.join(prefix, basename)
            if os.path.isfile(candidate):
                return candidate
        if os.path.dirname(prefix) == prefix:
            # We've walked all the way to the top. Bail.
            raise CopyGlobError(
                "Can't find any of {} in {} or its parents.",
                ', '.join(basenames), os.path.abspath(start_dir))
        # Not found at this level. We must go...shallower.
        prefix = os.path.dirname(prefix)


def get_root_path(start_dir=None, env=None):
    '''The directory holding the project's build descriptor. $COPYGLOB_ROOT
    wins if it's set.'''
    if env is None:
        env = os.environ
    explicit_root = env.get(ROOT_ENV_VAR)
    if explicit_root:
        return os.path.abspath(explicit_root)
    if start_dir is None:
        start_dir = os.getcwd()
    return os.path.dirname(find_project_file(start_dir, PROJECT_FILE_NAMES))


def get_profile(profile=None, env=None):
    if env is None:
        env = os.environ
    profile = profile or env.get(PROFILE_ENV_VAR) or DEFAULT_PROFILE
    if profile not in PROFILES:
        raise CopyGlobError('Unknown build profile "{}". Use one of: {}.',
                            profile, ', '.join(PROFILES))
    return profile


def get_target_folder(root=None, profile=None, env=None):
    '''target/debug or target/release under the project root.'''
    if root is None:
        root = get_root_path(env=env)
    return os.path.join(root, TARGET_DIR_NAME, get_profile(profile, env))


def rerun_if_changed(path, output=None):
    '''A visit sink for copy_glob(). Tells an enclosing build system which
    paths the copy step depends on.'''
    print('rerun-if-changed={}'.format(path), file=output or sys.stdout)
