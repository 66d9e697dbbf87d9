import sys
from unittest import TestCase

from kdbxcommander.error import VaultToolNotFound
from kdbxcommander.runner import CommandRunner, CommandResult, build_args

ECHO_STDIN = 'import sys; line = sys.stdin.readline(); sys.stdout.write("got " + line); ' \
             'sys.stderr.write("err\\n"); sys.stderr.flush(); sys.exit(int(sys.argv[1]))'


class TestCommandRunner(TestCase):
    def test_password_is_passed_on_stdin(self):
        runner = CommandRunner()
        rs = runner.run('s3cr3t', [sys.executable, '-c', ECHO_STDIN, '0'])
        self.assertIsInstance(rs, CommandResult)
        self.assertEqual(rs.returncode, 0)
        self.assertIn('got s3cr3t\n', rs.output)
        self.assertIn('err', rs.output)
        self.assertIs(runner.last_result, rs)

    def test_exit_status(self):
        runner = CommandRunner()
        rs = runner.run('', [sys.executable, '-c', ECHO_STDIN, '3'])
        self.assertEqual(rs.returncode, 3)

    def test_missing_tool(self):
        runner = CommandRunner()
        with self.assertRaises(VaultToolNotFound) as cm:
            runner.run('pw', ['/nonexistent/keepassxc-cli', 'ls', 'db.kdbx'])
        self.assertEqual(cm.exception.tool, '/nonexistent/keepassxc-cli')
        self.assertIsNone(runner.last_result)

    def test_debug_output(self):
        runner = CommandRunner(debug=True)
        with self.assertLogs('kdbxcommander.debug', level='DEBUG') as cm:
            runner.run('s3cr3t', [sys.executable, '-c', ECHO_STDIN, '0'])
        self.assertTrue(any('s3cr3t' in x for x in cm.output))

    def test_build_args(self):
        self.assertEqual(build_args('keepassxc-cli', 'ls', ('-R', '-f'), 'db.kdbx', 'Web/'),
                         ['keepassxc-cli', 'ls', '-R', '-f', 'db.kdbx', 'Web/'])
        self.assertEqual(build_args('keepassxc-cli', 'ls', (), 'db.kdbx', ''),
                         ['keepassxc-cli', 'ls', 'db.kdbx'])
        self.assertEqual(build_args('keepassxc-cli', 'show', None, 'db.kdbx', 'a'),
                         ['keepassxc-cli', 'show', 'db.kdbx', 'a'])
