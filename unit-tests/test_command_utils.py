from unittest import TestCase, mock

from helper import ScriptedRunner, ScriptedPrompt, failure, get_open_params, unlocked
from kdbxcommander.commands import utils
from kdbxcommander.error import AuthenticationFailed, CommandError
from kdbxcommander.params import VaultParams


class TestVaultCommands(TestCase):
    def get_params(self, *results, prompt=None):
        params = VaultParams()
        params.runner = ScriptedRunner(results)
        params.password_prompt = prompt or ScriptedPrompt()
        return params

    def test_open(self):
        params = self.get_params(unlocked('Web/\nmail\n'), prompt=ScriptedPrompt('master'))
        with mock.patch('os.path.isfile', return_value=True):
            utils.OpenCommand().execute(params, vault='/tmp/test.kdbx')
        self.assertIsNotNone(params.vault)
        self.assertEqual(params.vault.session.password, 'master')
        self.assertEqual(params.vault.cached_listing(), ['Web/', 'mail'])

    def test_open_missing_file(self):
        params = self.get_params()
        with mock.patch('os.path.isfile', return_value=False):
            with self.assertRaises(CommandError):
                utils.OpenCommand().execute(params, vault='/tmp/missing.kdbx')
        self.assertIsNone(params.vault)

    def test_open_rejected_password_closes_vault(self):
        params = self.get_params(failure(), prompt=ScriptedPrompt('wrong'))
        params.enforce_valid_password = False
        with mock.patch('os.path.isfile', return_value=True):
            with self.assertRaises(AuthenticationFailed):
                utils.OpenCommand().execute(params, vault='/tmp/test.kdbx')
        self.assertIsNone(params.vault)
        self.assertIsNone(params.password)

    def test_open_interrupted_prompt_closes_vault(self):
        params = self.get_params()
        with mock.patch('os.path.isfile', return_value=True):
            with self.assertRaises(KeyboardInterrupt):
                utils.OpenCommand().execute(params, vault='/tmp/test.kdbx')
        self.assertIsNone(params.vault)
        self.assertTrue(params.runner.is_expect_empty())

    def test_lock(self):
        params, runner = get_open_params()
        utils.LockCommand().execute(params)
        self.assertFalse(params.vault.session.is_unlocked)
        self.assertIsNone(params.password)
