import os
from pathlib import Path
from unittest import mock

from copyglob.glob import InvalidPatternError
from copyglob.options import (CopyOptions, CopyOptionsBuilder,
                              DEFAULT_EXCLUDES)
import shared


class OptionsTest(shared.CopyGlobTest):
    def setUp(self):
        self.project = shared.create_dir({'pyproject.toml': ''})

    def test_defaults(self):
        with mock.patch.dict(os.environ, {'COPYGLOB_ROOT': self.project}):
            options = CopyOptionsBuilder().build()
        self.assertIsInstance(options, CopyOptions)
        self.assertEqual(os.path.abspath(self.project), options.root)
        self.assertEqual(DEFAULT_EXCLUDES, options.exclude.globs)
        self.assertEqual(('**/target/*',), DEFAULT_EXCLUDES)

    def test_set_root_path(self):
        other = shared.create_dir()
        options = (CopyOptionsBuilder(self.project)
                   .set_root_path(Path(other))
                   .build())
        self.assertEqual(other, options.root)

    def test_relative_root_is_kept_as_given(self):
        options = CopyOptionsBuilder(self.project).set_root_path('a/b').build()
        self.assertEqual('a/b', options.root)

    def test_add_exclude_is_cumulative(self):
        options = (CopyOptionsBuilder(self.project)
                   .add_exclude('**/*.tmp')
                   .add_exclude('docs/*')
                   .build())
        self.assertEqual(('**/target/*', '**/*.tmp', 'docs/*'),
                         options.exclude.globs)
        self.assertTrue(options.exclude.is_match('target/debug'))
        self.assertTrue(options.exclude.is_match('x/y.tmp'))
        self.assertTrue(options.exclude.is_match('docs/index.md'))
        self.assertFalse(options.exclude.is_match('src/main.py'))

    def test_clear_excludes(self):
        options = (CopyOptionsBuilder(self.project)
                   .clear_excludes()
                   .add_exclude('*.bak')
                   .build())
        self.assertEqual(('*.bak',), options.exclude.globs)
        self.assertFalse(options.exclude.is_match('target/debug'))

    def test_bad_exclude_fails_at_build(self):
        builder = CopyOptionsBuilder(self.project).add_exclude('[oops')
        with self.assertRaises(InvalidPatternError):
            builder.build()

    def test_options_are_immutable(self):
        options = CopyOptionsBuilder(self.project).build()
        with self.assertRaises(AttributeError):
            options.root = '/somewhere/else'

    def test_builder_changes_dont_leak_into_built_options(self):
        builder = CopyOptionsBuilder(self.project)
        options = builder.build()
        builder.add_exclude('*.txt')
        self.assertEqual(DEFAULT_EXCLUDES, options.exclude.globs)
