import os
from pathlib import PurePosixPath
from unittest import mock

import copyglob.compat as compat
import shared


class CompatTest(shared.CopyGlobTest):
    def test_makedirs(self):
        tmp_dir = shared.tmp_dir()
        foo_dir = os.path.join(tmp_dir, "foo", "bar")
        compat.makedirs(foo_dir)
        self.assertTrue(os.path.isdir(foo_dir))
        os.chmod(foo_dir, 0o700)
        # Creating the dir again should be a no-op even though the permissions
        # have changed.
        compat.makedirs(foo_dir)

    def test_makedirs_over_a_file(self):
        tmp_dir = shared.create_dir({'foo': 'not a dir'})
        with self.assertRaises(OSError):
            compat.makedirs(os.path.join(tmp_dir, 'foo'))

    def test_to_posix(self):
        self.assertEqual('a/b', compat.to_posix('a/b'))
        self.assertEqual('a/b', compat.to_posix(PurePosixPath('a', 'b')))
        with mock.patch('os.sep', '\\'), mock.patch('os.altsep', '/'):
            self.assertEqual('a/b/c', compat.to_posix('a\\b/c'))
