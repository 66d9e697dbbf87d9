#  _        _  _
# | |__  __| || |__ __ __
# | / / / _` || '_ \\ \ /
# |_\_\ \__,_||_.__//_\_\
#
# KDBX Commander
# Copyright 2026 KDBX Commander contributors
#

import getpass
import logging
import os
from typing import Callable, Optional, Sequence

from .error import AuthenticationFailed
from .parser import strip_unlock_prompt
from .runner import CommandRunner, CommandResult, DEFAULT_VAULT_TOOL, build_args

PasswordPrompt = Callable[[str], str]


def prompt_password(database):    # type: (str) -> str
    label = 'Password for ' + os.path.basename(database)
    return getpass.getpass(prompt='{0:>24}: '.format(label), stream=None)


class VaultSession:
    """Master password of one open vault file.

    The password is asked once, on first use, and kept for the lifetime of
    the session. It is replaced only when the vault tool rejects it and the
    enforce-valid-password policy asks for another one.
    """

    def __init__(self, database, password=None, enforce_valid_password=True, runner=None,
                 prompt=None, tool=DEFAULT_VAULT_TOOL):
        # type: (str, Optional[str], bool, Optional[CommandRunner], Optional[PasswordPrompt], str) -> None
        self._database = database
        self.password = password
        self.enforce_valid_password = enforce_valid_password
        self.runner = runner or CommandRunner()
        self.prompt = prompt or prompt_password
        self.tool = tool

    @property
    def database(self):    # type: () -> str
        return self._database

    @property
    def is_unlocked(self):    # type: () -> bool
        return self.password is not None

    def unlock(self):    # type: () -> str
        if self.password is None:
            self.password = self.prompt(self._database)
        return self.password

    def lock(self):
        self.password = None

    def build_args(self, subcommand, target='', options=()):
        return build_args(self.tool, subcommand, options, self._database, target)

    def execute_result(self, subcommand, target='', options=()):
        # type: (str, str, Sequence[str]) -> CommandResult
        password = self.unlock()
        attempt = 0
        while True:
            attempt += 1
            args = self.build_args(subcommand, target, options)
            rs = self.runner.run(password, args)
            output = strip_unlock_prompt(rs.output)
            if rs.returncode == 0:
                self.password = password
                return CommandResult(rs.returncode, output)

            if not self.enforce_valid_password:
                return CommandResult(rs.returncode, output)

            logging.warning('%s', output.strip() or 'Vault tool exited with status %d' % rs.returncode)
            logging.debug('Unlock attempt %d for "%s" failed', attempt, self._database)
            password = self.prompt(self._database)
            self.password = password

    def execute(self, subcommand, target='', options=()):    # type: (str, str, Sequence[str]) -> str
        rs = self.execute_result(subcommand, target, options)
        if rs.returncode != 0:
            raise AuthenticationFailed(rs.returncode, rs.output.strip())
        return rs.output
