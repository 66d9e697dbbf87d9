#  _        _  _
# | |__  __| || |__ __ __
# | / / / _` || '_ \\ \ /
# |_\_\ \__,_||_.__//_\_\
#
# KDBX Commander
# Copyright 2026 KDBX Commander contributors
#

import logging
import subprocess
from typing import NamedTuple, Optional, Sequence, List

from .error import VaultToolNotFound

DEFAULT_VAULT_TOOL = 'keepassxc-cli'

debug_logger = logging.getLogger('kdbxcommander.debug')


class CommandResult(NamedTuple):
    returncode: int
    output: str


def build_args(tool, subcommand, options, database, target=''):
    # type: (str, str, Sequence[str], str, Optional[str]) -> List[str]
    args = [tool, subcommand]
    args.extend(options or ())
    args.append(database)
    if target:
        args.append(target)
    return args


class CommandRunner:
    """Runs the vault tool once per call.

    The master password is written to the child's standard input, never to
    argv or the environment. Standard error is merged into the captured
    output.
    """

    def __init__(self, debug=False):
        self.debug = debug
        self.last_result = None    # type: Optional[CommandResult]

    def run(self, password, args):    # type: (str, Sequence[str]) -> CommandResult
        self.last_result = None
        stdin = (password or '') + '\n'
        try:
            proc = subprocess.run(list(args), input=stdin.encode('utf-8'),
                                  stdout=subprocess.PIPE, stderr=subprocess.STDOUT)
        except (FileNotFoundError, PermissionError) as e:
            raise VaultToolNotFound(args[0], f'Cannot execute vault tool: {e.strerror or e}')

        result = CommandResult(proc.returncode, proc.stdout.decode('utf-8', errors='replace'))
        if self.debug:
            debug_logger.debug('Command: %s', ' '.join(args))
            debug_logger.debug('Password: %s', password)
            debug_logger.debug('Exit status %d, output:\n%s', result.returncode, result.output)
        self.last_result = result
        return result
