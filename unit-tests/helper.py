from kdbxcommander.params import VaultParams
from kdbxcommander.runner import CommandResult


class ScriptedRunner:
    """Stands in for CommandRunner: replays queued results and records every call."""

    def __init__(self, results=None):
        self.results = list(results or [])
        self.calls = []
        self.debug = False
        self.last_result = None

    def expect(self, *results):
        self.results.extend(results)

    def is_expect_empty(self):
        return len(self.results) == 0

    def run(self, password, args):
        self.calls.append((password, list(args)))
        rs = self.results.pop(0)
        if isinstance(rs, str):
            rs = CommandResult(0, rs)
        elif isinstance(rs, Exception):
            raise rs
        self.last_result = rs
        return rs

    @property
    def passwords(self):
        return [x[0] for x in self.calls]

    @property
    def args(self):
        return [x[1] for x in self.calls]


class ScriptedPrompt:
    def __init__(self, *passwords):
        self.passwords = list(passwords)
        self.calls = 0

    def __call__(self, database):
        self.calls += 1
        if not self.passwords:
            raise KeyboardInterrupt()
        return self.passwords.pop(0)


def failure(message='Error while reading the database: Invalid credentials were provided, please try again.'):
    return CommandResult(1, 'Enter password to unlock /tmp/test.kdbx: \n' + message + '\n')


def unlocked(text):
    return CommandResult(0, 'Enter password to unlock /tmp/test.kdbx: \n' + text)


def get_open_params(*results, password='master', database='/tmp/test.kdbx'):
    params = VaultParams()
    runner = ScriptedRunner(results)
    params.runner = runner
    params.password_prompt = ScriptedPrompt()
    params.open_vault(database, password=password)
    return params, runner
