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

from . import base
from .base import suppress_exit, raise_parse_exception, dump_report_data, Command, VaultMixin
from .. import display
from ..error import CommandError
from ..params import VaultParams
from ..parser import PASSWORD_FIELD, USERNAME_FIELD, URL_FIELD, PASSWORD_MASK
from ..subfolder import is_group


def register_commands(commands):
    commands['show'] = EntryShowCommand()
    commands['get'] = EntryGetCommand()
    commands['password'] = EntryFieldCommand(password_parser, PASSWORD_FIELD)
    commands['username'] = EntryFieldCommand(username_parser, USERNAME_FIELD)
    commands['url'] = EntryFieldCommand(url_parser, URL_FIELD)


def register_command_info(aliases, command_info):
    parsers = [show_parser, get_parser, password_parser, username_parser, url_parser]
    for p in parsers:
        command_info[p.prog] = p.description

    aliases['get-info'] = 'show'
    aliases['pw'] = 'password'
    aliases['user'] = 'username'


show_parser = argparse.ArgumentParser(prog='show', description='Display entry details.')
show_parser.add_argument('--unmask', dest='unmask', action='store_true', help='display the password')
show_parser.add_argument('entry', nargs='?', type=str, action='store', help='entry name')
show_parser.error = raise_parse_exception
show_parser.exit = suppress_exit


get_parser = argparse.ArgumentParser(prog='get', description='Print an entry field.', parents=[base.json_output_parser])
get_parser.add_argument('-f', '--field', dest='field', action='store', default=PASSWORD_FIELD,
                        help='field name (default: Password)')
get_parser.add_argument('-a', '--all', dest='all', action='store_true', help='print all fields')
get_parser.add_argument('--unmask', dest='unmask', action='store_true', help='do not mask the password with --all')
get_parser.add_argument('entry', nargs='?', type=str, action='store', help='entry name')
get_parser.error = raise_parse_exception
get_parser.exit = suppress_exit


def field_parser(prog, field):
    parser = argparse.ArgumentParser(prog=prog, description=f'Print the {field} of an entry.')
    parser.add_argument('entry', nargs='?', type=str, action='store', help='entry name')
    parser.error = raise_parse_exception
    parser.exit = suppress_exit
    return parser


password_parser = field_parser('password', PASSWORD_FIELD)
username_parser = field_parser('username', USERNAME_FIELD)
url_parser = field_parser('url', URL_FIELD)


class EntryShowCommand(Command, VaultMixin):
    def get_parser(self):
        return show_parser

    def execute(self, params, **kwargs):    # type: (VaultParams, any) -> any
        vault = self.get_vault(params)
        name = self.require_entry(kwargs.get('entry'), 'show')
        if is_group(name):
            raise CommandError('show', f'"{name}" is a group. Use "cd {name}"')
        unmask = kwargs.get('unmask') is True or params.unmask_all
        details = vault.get_entry_details(name, unmask=unmask)
        if not details.strip():
            logging.info('Entry "%s" has no fields', name)
            return
        display.formatted_entry(details)


class EntryGetCommand(Command, VaultMixin):
    def get_parser(self):
        return get_parser

    def execute(self, params, **kwargs):    # type: (VaultParams, any) -> any
        vault = self.get_vault(params)
        name = self.require_entry(kwargs.get('entry'), 'get')
        if kwargs.get('all') is True:
            unmask = kwargs.get('unmask') is True or params.unmask_all
            fields = vault.get_fields(name)
            table = [[k, v if unmask or k != PASSWORD_FIELD else PASSWORD_MASK] for k, v in fields.items()]
            if kwargs.get('format') == 'json':
                return dump_report_data(table, ['field', 'value'], fmt='json', filename=kwargs.get('output'))
            dump_report_data(table, ['Field', 'Value'])
            return

        field = kwargs.get('field') or PASSWORD_FIELD
        value = vault.get_field(name, field)
        if not value:
            logging.info('%s: field "%s" is empty or not present', name, field)
            return
        return value


class EntryFieldCommand(Command, VaultMixin):
    def __init__(self, parser, field):
        super().__init__()
        self.parser = parser
        self.field = field

    def get_parser(self):
        return self.parser

    def execute(self, params, **kwargs):    # type: (VaultParams, any) -> any
        vault = self.get_vault(params)
        name = self.require_entry(kwargs.get('entry'), self.parser.prog)
        value = vault.get_field(name, self.field)
        if not value:
            logging.info('%s: %s is not set', name, self.field)
            return
        return value
