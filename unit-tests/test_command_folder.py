import json
from unittest import TestCase, mock

from helper import get_open_params, unlocked
from kdbxcommander.commands import folder
from kdbxcommander.error import CommandError
from kdbxcommander.params import VaultParams


class TestGroupCommands(TestCase):
    def test_list(self):
        params, runner = get_open_params(unlocked('Web/\nmail\n'), unlocked('Web/\nmail\n'))
        cmd = folder.GroupListCommand()
        with mock.patch('builtins.print') as mock_print:
            cmd.execute(params)
            cmd.execute(params, short=True)
            self.assertTrue(mock_print.called)
        self.assertTrue(runner.is_expect_empty())

    def test_list_json(self):
        params, runner = get_open_params(unlocked('Web/\nmail\n'))
        cmd = folder.GroupListCommand()
        result = cmd.execute_args(params, '--format json')
        self.assertEqual(json.loads(result), [{'name': 'Web/', 'type': 'group'}, {'name': 'mail', 'type': 'entry'}])

    def test_list_recursive_flag_is_temporary(self):
        params, runner = get_open_params(unlocked('Web/\nWeb/mail\n'))
        cmd = folder.GroupListCommand()
        with mock.patch('builtins.print'):
            cmd.execute_args(params, '-R')
        self.assertIn('-R', runner.args[0])
        self.assertFalse(params.vault.recursive)

    def test_change_group(self):
        params, runner = get_open_params(unlocked('Web/\nmail\n'), unlocked('Mail/\n'))
        cmd = folder.GroupCdCommand()
        cmd.execute(params, group='Web')
        self.assertEqual(params.vault.current_group, 'Web/')
        cmd.execute(params, group='Mail/')
        self.assertEqual(params.vault.current_group, 'Web/Mail/')
        cmd.execute(params, group='..')
        self.assertEqual(params.vault.current_group, 'Web/')
        cmd.execute(params, group='/')
        self.assertEqual(params.vault.current_group, '')

    def test_change_group_invalid(self):
        params, runner = get_open_params(unlocked('Web/\nmail\n'), unlocked('Web/\nmail\n'))
        cmd = folder.GroupCdCommand()
        with self.assertRaises(CommandError):
            cmd.execute(params, group='Invalid')
        with self.assertRaises(CommandError):
            cmd.execute(params, group='mail')
        self.assertEqual(params.vault.current_group, '')

    def test_change_group_invalid_keeps_current_group(self):
        params, runner = get_open_params(unlocked('Web/\nmail\n'), unlocked('Mail/\n'),
                                         unlocked('Other/\n'))
        cmd = folder.GroupCdCommand()
        with self.assertRaises(CommandError):
            cmd.execute(params, group='Web/Missing')
        self.assertEqual(params.vault.current_group, '')

        params.vault.enter_group('Web/')
        with self.assertRaises(CommandError):
            cmd.execute(params, group='/Missing')
        self.assertEqual(params.vault.current_group, 'Web/')
        self.assertTrue(runner.is_expect_empty())

    def test_back(self):
        params, runner = get_open_params()
        params.vault.enter_group('Web/')
        folder.GroupBackCommand().execute(params)
        self.assertEqual(params.vault.current_group, '')
        folder.GroupBackCommand().execute(params)
        self.assertEqual(params.vault.current_group, '')
        self.assertEqual(len(runner.calls), 0)

    def test_pwd(self):
        params, _ = get_open_params()
        params.vault.enter_group('Web/')
        self.assertEqual(folder.GroupPwdCommand().execute(params), '/Web/')

    def test_tree(self):
        params, runner = get_open_params(unlocked('Web/\nWeb/mail\nWeb/Old/\nbank\n'))
        cmd = folder.GroupTreeCommand()
        with mock.patch('builtins.print') as mock_print:
            cmd.execute(params, entries=True)
        tree_txt = mock_print.call_args_list[0][0][0]
        self.assertIn('test.kdbx', tree_txt)
        self.assertIn('Old/', tree_txt)
        self.assertIn('bank', tree_txt)
        self.assertIn('-R', runner.args[0])

    def test_no_vault(self):
        params = VaultParams()
        with self.assertRaises(CommandError):
            folder.GroupListCommand().execute(params)
