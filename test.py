#! /usr/bin/env python3

'''Runs the unit tests from tests/ and then flake8. Pass --with-coverage to
run the tests under coverage. Any other arguments go to unittest.'''

import os
import subprocess
import sys

REPO_ROOT = os.path.dirname(os.path.realpath(__file__))
TESTS_DIR = os.path.join(REPO_ROOT, 'tests')


def untracked_files():
    # Empty outside a git checkout.
    try:
        output = subprocess.check_output(
            ['git', 'ls-files', '--other', '--exclude-standard', '-z'],
            cwd=REPO_ROOT, stderr=subprocess.DEVNULL)
    except (OSError, subprocess.CalledProcessError):
        return set()
    return {f.decode() for f in output.split(b'\0') if f}


def run(command, **kwargs):
    if subprocess.call(command, **kwargs) != 0:
        sys.exit(1)


def main(args):
    # COPYGLOB_ROOT or COPYGLOB_PROFILE from the calling shell would change
    # what the tests resolve.
    env = {k: v for k, v in os.environ.items()
           if not k.startswith('COPYGLOB_')}
    env['PYTHONPATH'] = REPO_ROOT

    runner = [sys.executable]
    if args[:1] == ['--with-coverage']:
        args = args[1:]
        runner = ['coverage', 'run']

    before = untracked_files()
    run(runner + ['-m', 'unittest'] + args, env=env, cwd=TESTS_DIR)
    stray = untracked_files() - before
    if stray:
        print('Tests left files in the repo:', *sorted(stray), sep='\n  ',
              file=sys.stderr)
        sys.exit(1)

    run(['flake8', 'copyglob', 'tests'], cwd=REPO_ROOT)


if __name__ == '__main__':
    main(sys.argv[1:])
