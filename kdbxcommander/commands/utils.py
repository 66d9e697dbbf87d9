#  _        _  _
# | |__  __| || |__ __ __
# | / / / _` || '_ \\ \ /
# |_\_\ \__,_||_.__//_\_\
#
# KDBX Commander
# Copyright 2026 KDBX Commander contributors
#

import argparse
import logging
import os

from .base import suppress_exit, raise_parse_exception, Command, VaultMixin
from ..error import CommandError, Error
from ..params import VaultParams


def register_commands(commands):
    commands['open'] = OpenCommand()
    commands['lock'] = LockCommand()


def register_command_info(aliases, command_info):
    for p in [open_parser, lock_parser]:
        command_info[p.prog] = p.description


open_parser = argparse.ArgumentParser(prog='open', description='Open a KeePass vault file.')
open_parser.add_argument('vault', nargs='?', type=str, action='store', help='path to .kdbx or .kdb file')
open_parser.error = raise_parse_exception
open_parser.exit = suppress_exit


lock_parser = argparse.ArgumentParser(prog='lock', description='Forget the master password of the open vault.')
lock_parser.error = raise_parse_exception
lock_parser.exit = suppress_exit


class OpenCommand(Command):
    def get_parser(self):
        return open_parser

    def requires_vault(self):
        return False

    def execute(self, params, **kwargs):    # type: (VaultParams, any) -> any
        filename = kwargs.get('vault') or params.vault_file
        if not filename:
            raise CommandError('open', 'Vault file path is required')
        filename = os.path.expanduser(filename)
        if not os.path.isfile(filename):
            raise CommandError('open', f'File "{filename}" does not exist')
        vault = params.open_vault(filename, password=kwargs.get('password'))
        try:
            vault.session.unlock()
            vault.list_current_group()
        except (Error, KeyboardInterrupt, EOFError):
            params.clear_session()
            raise
        logging.info('Vault "%s" is open', vault.name)


class LockCommand(Command, VaultMixin):
    def get_parser(self):
        return lock_parser

    def execute(self, params, **kwargs):    # type: (VaultParams, any) -> any
        vault = self.get_vault(params)
        vault.session.lock()
        params.password = None
        logging.info('Vault "%s" is locked', vault.name)
