from unittest import TestCase

import pytest

from kdbxcommander import subfolder
from kdbxcommander.subfolder import GroupPath


ascend_params = (
    ('', ''),
    ('Web/', ''),
    ('Web/Mail/', 'Web/'),
    ('Web/Mail/Old/', 'Web/Mail/'),
    ('Web and Mail/Old Accounts/', 'Web and Mail/'),
)


@pytest.mark.parametrize('path, expected', ascend_params)
def test_group_path_ascend(path, expected):
    group_path = GroupPath(path)
    assert group_path.path == path
    assert group_path.ascend() == expected


@pytest.mark.parametrize('path', ['Web/', 'Web/Mail/', 'a/b/c/'])
@pytest.mark.parametrize('segment', ['x', 'x/', 'Banking Accounts'])
def test_descend_then_ascend_returns(path, segment):
    group_path = GroupPath(path)
    group_path.descend(segment)
    group_path.ascend()
    assert group_path.resolve() == path


@pytest.mark.parametrize('path, expected', [('Folder/', True), ('login.example.com', False),
                                            ('Web/login.example.com', False), ('Web/Mail/', True),
                                            ('', False), (None, False)])
def test_is_group(path, expected):
    assert subfolder.is_group(path) is expected


class TestGroupPath(TestCase):
    def test_root(self):
        group_path = GroupPath()
        self.assertTrue(group_path.is_root)
        self.assertEqual(group_path.resolve(), '')
        self.assertEqual(group_path.ascend(), '')
        self.assertEqual(group_path.ascend(), '')

    def test_resolve(self):
        group_path = GroupPath('Web/')
        self.assertEqual(group_path.resolve('login.example.com'), 'Web/login.example.com')
        self.assertEqual(group_path.resolve(''), 'Web/')
        self.assertEqual(group_path.resolve(), 'Web/')
        self.assertEqual(group_path.path, 'Web/')

    def test_descend(self):
        group_path = GroupPath()
        self.assertEqual(group_path.descend('Web/'), 'Web/')
        self.assertEqual(group_path.descend('Mail'), 'Web/Mail/')
        self.assertEqual(group_path.descend(''), 'Web/Mail/')
        self.assertEqual(group_path.segments, ['Web', 'Mail'])
        self.assertFalse(group_path.is_root)

    def test_reset(self):
        group_path = GroupPath('Web/Mail/')
        group_path.reset()
        self.assertTrue(group_path.is_root)

    def test_display_name(self):
        group_path = GroupPath('Web/Mail/')
        self.assertEqual(group_path.display_name('test.kdbx'), 'test.kdbx/Web/Mail')
        self.assertEqual(group_path.display_name(), 'Web/Mail')
        self.assertEqual(GroupPath().display_name('test.kdbx'), 'test.kdbx')

    def test_equality(self):
        self.assertEqual(GroupPath('Web/'), GroupPath('Web'))
        self.assertEqual(GroupPath('Web/'), 'Web/')
        self.assertNotEqual(GroupPath('Web/'), GroupPath())

    def test_entry_name(self):
        self.assertEqual(subfolder.entry_name('Web/Mail/'), 'Mail')
        self.assertEqual(subfolder.entry_name('Web/login.example.com'), 'login.example.com')
        self.assertEqual(subfolder.entry_name('login'), 'login')
