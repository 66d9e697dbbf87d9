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
from ..error import CommandError, Error
from ..params import VaultParams
from ..subfolder import GroupPath, is_group, is_abs_path, PathDelimiter


def register_commands(commands):
    commands['ls'] = GroupListCommand()
    commands['cd'] = GroupCdCommand()
    commands['back'] = GroupBackCommand()
    commands['tree'] = GroupTreeCommand()
    commands['pwd'] = GroupPwdCommand()


def register_command_info(aliases, command_info):
    parsers = [ls_parser, cd_parser, back_parser, tree_parser, pwd_parser]
    for p in parsers:
        command_info[p.prog] = p.description

    aliases['dir'] = 'ls'
    aliases['..'] = 'back'


ls_parser = argparse.ArgumentParser(prog='ls', description='List the current group.', parents=[base.json_output_parser])
ls_parser.add_argument('-s', '--short', dest='short', action='store_true', help='display names only')
recursive_help = 'list all groups and entries in subgroups'
ls_parser.add_argument('-R', '--recursive', dest='recursive', action='store_true', help=recursive_help)
ls_parser.add_argument('pattern', nargs='?', type=str, action='store', help='search pattern')
ls_parser.error = raise_parse_exception
ls_parser.exit = suppress_exit


cd_parser = argparse.ArgumentParser(prog='cd', description='Change current group.')
cd_parser.add_argument('group', nargs='?', type=str, action='store', help='group name, ".." or "/"')
cd_parser.error = raise_parse_exception
cd_parser.exit = suppress_exit


back_parser = argparse.ArgumentParser(prog='back', description='Go back to the parent group.')
back_parser.error = raise_parse_exception
back_parser.exit = suppress_exit


tree_parser = argparse.ArgumentParser(prog='tree', description='Display the group structure.')
tree_parser.add_argument('-e', '--entries', dest='entries', action='store_true', help='show entries within each group')
tree_parser.error = raise_parse_exception
tree_parser.exit = suppress_exit


pwd_parser = argparse.ArgumentParser(prog='pwd', description='Display the current group path.')
pwd_parser.error = raise_parse_exception
pwd_parser.exit = suppress_exit


class GroupListCommand(Command, VaultMixin):
    def get_parser(self):
        return ls_parser

    def execute(self, params, **kwargs):    # type: (VaultParams, any) -> any
        vault = self.get_vault(params)
        recursive = vault.recursive
        if kwargs.get('recursive') is True:
            vault.recursive = True
        try:
            entries = vault.find_entries(kwargs.get('pattern') or '')
        finally:
            vault.recursive = recursive

        if kwargs.get('format') == 'json':
            table = [[x, 'group' if is_group(x) else 'entry'] for x in entries]
            return dump_report_data(table, ['name', 'type'], fmt='json', filename=kwargs.get('output'))

        if len(entries) == 0:
            if kwargs.get('pattern'):
                logging.info('No entries match "%s"', kwargs.get('pattern'))
            return
        display.formatted_entries(entries, short=kwargs.get('short') is True)


class GroupCdCommand(Command, VaultMixin):
    def get_parser(self):
        return cd_parser

    def execute(self, params, **kwargs):    # type: (VaultParams, any) -> any
        vault = self.get_vault(params)
        group = kwargs.get('group') or ''
        if not group or group == PathDelimiter:
            vault.go_root()
            return

        start_path = vault.current_group
        try:
            if is_abs_path(group):
                vault.go_root()
                group = group[1:]

            for component in [x for x in group.split(PathDelimiter) if x]:
                if component == '..':
                    vault.go_back()
                elif component != '.':
                    entries = vault.list_current_group()
                    name = component + PathDelimiter
                    if name not in entries and vault.group_path.resolve(name) not in entries:
                        raise CommandError('cd', f'Group "{component}" not found')
                    vault.enter_group(name)
        except (Error, KeyboardInterrupt, EOFError):
            vault.group_path = GroupPath(start_path)
            raise


class GroupBackCommand(Command, VaultMixin):
    def get_parser(self):
        return back_parser

    def execute(self, params, **kwargs):    # type: (VaultParams, any) -> any
        self.get_vault(params).go_back()


class GroupPwdCommand(Command, VaultMixin):
    def get_parser(self):
        return pwd_parser

    def execute(self, params, **kwargs):    # type: (VaultParams, any) -> any
        vault = self.get_vault(params)
        return PathDelimiter + vault.current_group


class GroupTreeCommand(Command, VaultMixin):
    def get_parser(self):
        return tree_parser

    def execute(self, params, **kwargs):    # type: (VaultParams, any) -> any
        vault = self.get_vault(params)
        entries = vault.list_recursive()
        if kwargs.get('entries') is not True:
            entries = [x for x in entries if is_group(x)]
        root_name = vault.group_path.display_name(vault.name)
        display.formatted_tree(entries, root_name, prefix=vault.current_group)
