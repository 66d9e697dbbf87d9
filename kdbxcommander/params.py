#  _        _  _
# | |__  __| || |__ __ __
# | / / / _` || '_ \\ \ /
# |_\_\ \__,_||_.__//_\_\
#
# KDBX Commander
# Copyright 2026 KDBX Commander contributors
#
import logging
import os
from typing import Optional

from .runner import CommandRunner, DEFAULT_VAULT_TOOL, debug_logger
from .session import VaultSession, PasswordPrompt
from .vault import KdbxVault


class VaultParams:
    def __init__(self, config_filename='', config=None):
        self.config_filename = config_filename
        self.config = config or {}
        self.vault_file = ''
        self.password = None            # type: Optional[str]
        self.keepassxc_cli = DEFAULT_VAULT_TOOL
        self.recursive_listing = False
        self.enforce_valid_password = True
        self.unmask_all = False
        self.commands = []
        self.batch_mode = False
        self.password_prompt = None     # type: Optional[PasswordPrompt]
        self.vault = None               # type: Optional[KdbxVault]
        self.runner = CommandRunner()
        self.__debug = False

    def __get_debug(self):
        return self.__debug

    def __set_debug(self, value):
        self.__debug = value is True
        self.runner.debug = self.__debug
        if self.__debug:
            debug_logger.setLevel(logging.DEBUG)
            logging.warning('Debug output of the vault tool is ON. Master password and secrets are logged in clear text.')
        else:
            debug_logger.setLevel(logging.NOTSET)

    debug = property(__get_debug, __set_debug)

    def load_config_properties(self):
        config = self.config
        if 'keepassxc_cli' in config and config['keepassxc_cli']:
            self.keepassxc_cli = os.path.expanduser(config['keepassxc_cli'])
        if 'recursive_listing' in config:
            self.recursive_listing = config['recursive_listing'] is True
        if 'enforce_valid_password' in config:
            self.enforce_valid_password = config['enforce_valid_password'] is not False
        if 'unmask' in config:
            self.unmask_all = config['unmask'] is True
        if 'vault' in config and config['vault']:
            self.vault_file = os.path.expanduser(config['vault'])
        if 'commands' in config and config['commands']:
            self.commands.extend(config['commands'])
        if config.get('debug') is True:
            self.debug = True

    def open_vault(self, filename, password=None):    # type: (str, Optional[str]) -> KdbxVault
        password = password or self.password
        self.clear_session()
        self.vault_file = os.path.expanduser(filename)
        session = VaultSession(self.vault_file, password=password,
                               enforce_valid_password=self.enforce_valid_password,
                               runner=self.runner, prompt=self.password_prompt, tool=self.keepassxc_cli)
        self.vault = KdbxVault(session, recursive=self.recursive_listing)
        logging.debug('Vault "%s" opened', self.vault_file)
        return self.vault

    def clear_session(self):
        if self.vault:
            self.vault.session.lock()
        self.vault = None
        self.password = None
