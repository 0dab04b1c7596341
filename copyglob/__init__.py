from .copier import copy_glob, copy_glob_with
from .error import CopyGlobError, CopyIOError
from .glob import InvalidPatternError, compile_glob as new_glob
from .options import DEFAULT_EXCLUDES, CopyOptions, CopyOptionsBuilder
from .paths import get_root_path, get_target_folder, rerun_if_changed

__all__ = [
    'copy_glob',
    'copy_glob_with',
    'CopyGlobError',
    'CopyIOError',
    'CopyOptions',
    'CopyOptionsBuilder',
    'DEFAULT_EXCLUDES',
    'get_root_path',
    'get_target_folder',
    'InvalidPatternError',
    'new_glob',
    'rerun_if_changed',
]
