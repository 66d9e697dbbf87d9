import json
import logging
import os
import tempfile
from unittest import TestCase, mock

from kdbxcommander.__main__ import get_params_from_config, parser
from kdbxcommander.params import VaultParams
from kdbxcommander.runner import debug_logger


class TestConfiguration(TestCase):
    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.temp_dir.cleanup()
        debug_logger.setLevel(logging.NOTSET)

    def write_config(self, config):
        filename = os.path.join(self.temp_dir.name, 'config.json')
        with open(filename, 'w') as f:
            json.dump(config, f)
        return filename

    def test_defaults(self):
        params = VaultParams()
        self.assertEqual(params.keepassxc_cli, 'keepassxc-cli')
        self.assertTrue(params.enforce_valid_password)
        self.assertFalse(params.recursive_listing)
        self.assertFalse(params.debug)

    def test_load_config(self):
        filename = self.write_config({
            'keepassxc_cli': '/opt/keepassxc/keepassxc-cli',
            'recursive_listing': True,
            'enforce_valid_password': False,
            'vault': '/data/Passwords.kdbx',
            'unmask': True,
            'commands': ['ls'],
        })
        params = get_params_from_config(filename)
        self.assertEqual(params.config_filename, filename)
        self.assertEqual(params.keepassxc_cli, '/opt/keepassxc/keepassxc-cli')
        self.assertTrue(params.recursive_listing)
        self.assertFalse(params.enforce_valid_password)
        self.assertEqual(params.vault_file, '/data/Passwords.kdbx')
        self.assertTrue(params.unmask_all)
        self.assertEqual(params.commands, ['ls'])

    def test_debug_option_warns(self):
        filename = self.write_config({'debug': True})
        with self.assertLogs(level='WARNING'):
            params = get_params_from_config(filename)
        self.assertTrue(params.debug)
        self.assertTrue(params.runner.debug)
        self.assertEqual(debug_logger.level, logging.DEBUG)

    def test_config_from_environment(self):
        filename = self.write_config({'recursive_listing': True})
        with mock.patch.dict(os.environ, {'KDBX_COMMANDER_CONFIG': filename}):
            params = get_params_from_config()
        self.assertTrue(params.recursive_listing)

    def test_invalid_config_kept(self):
        filename = os.path.join(self.temp_dir.name, 'config.json')
        with open(filename, 'w') as f:
            f.write('{not json')
        with mock.patch('builtins.input', return_value='n'), self.assertLogs(level='ERROR'):
            with self.assertRaises(ValueError):
                get_params_from_config(filename)
        self.assertTrue(os.path.exists(filename))

    def test_invalid_config_deleted(self):
        filename = os.path.join(self.temp_dir.name, 'config.json')
        with open(filename, 'w') as f:
            f.write('{not json')
        with mock.patch('builtins.input', return_value='y'), self.assertLogs(level='ERROR'):
            params = get_params_from_config(filename)
        self.assertFalse(os.path.exists(filename))
        self.assertEqual(params.config, {})

    def test_open_vault_uses_settings(self):
        params = VaultParams()
        params.keepassxc_cli = '/opt/keepassxc-cli'
        params.enforce_valid_password = False
        params.recursive_listing = True
        params.password = 'from-env'
        vault = params.open_vault('/tmp/test.kdbx')
        self.assertEqual(vault.session.tool, '/opt/keepassxc-cli')
        self.assertFalse(vault.session.enforce_valid_password)
        self.assertTrue(vault.recursive)
        self.assertEqual(vault.session.password, 'from-env')
        self.assertIs(vault.session.runner, params.runner)

    def test_short_flags_are_passed_to_command(self):
        opts, flags = parser.parse_known_args(['db.kdbx', 'ls', '-R'])
        self.assertFalse(opts.recursive)
        self.assertEqual(opts.vault, 'db.kdbx')
        self.assertEqual(opts.command, 'ls')
        self.assertEqual(flags, ['-R'])

        opts, flags = parser.parse_known_args(['--recursive', 'db.kdbx'])
        self.assertTrue(opts.recursive)
        self.assertEqual(flags, [])
