#  _        _  _
# | |__  __| || |__ __ __
# | / / / _` || '_ \\ \ /
# |_\_\ \__,_||_.__//_\_\
#
# KDBX Commander
# Copyright 2026 KDBX Commander contributors
#

import abc
import argparse
import json
import logging
import os
import shlex
import sys
from collections import OrderedDict
from typing import Optional, Sequence, List, Any, Dict

from tabulate import tabulate

from .. import error
from ..params import VaultParams
from ..vault import KdbxVault

aliases = {}                 # type: Dict[str, str]
commands = {}                # type: Dict[str, Command]
command_info = OrderedDict()


json_output_parser = argparse.ArgumentParser(add_help=False)
json_output_parser.add_argument('--format', dest='format', action='store', choices=['table', 'json'],
                                default='table', help='format of output')
json_output_parser.add_argument('--output', dest='output', action='store',
                                help='path to resulting output file (ignored for "table" format)')


class CommandError(error.CommandError):
    def __init__(self, message):
        super().__init__('', message)


class ParseError(Exception):
    pass


def register_commands(commands, aliases, command_info):
    from .folder import register_commands as folder_commands, register_command_info as folder_command_info
    folder_commands(commands)
    folder_command_info(aliases, command_info)

    from .record import register_commands as record_commands, register_command_info as record_command_info
    record_commands(commands)
    record_command_info(aliases, command_info)

    from .utils import register_commands as misc_commands, register_command_info as misc_command_info
    misc_commands(commands)
    misc_command_info(aliases, command_info)


def raise_parse_exception(m):
    raise ParseError(m)


def suppress_exit(*args):
    raise ParseError()


def dump_report_data(data, headers, fmt='', filename=None):
    # type: (List[List], Sequence[str], Optional[str], Optional[str]) -> Optional[str]
    if fmt == 'json':
        data_list = []
        for row in data:
            obj = {}
            for index, column in enumerate(row):
                name = headers[index] if headers and index < len(headers) else "#{:0>2}".format(index)
                obj[name] = column
            data_list.append(obj)
        if filename:
            _, ext = os.path.splitext(filename)
            if not ext:
                filename += '.json'
            logging.info('Report path: %s', os.path.abspath(filename))
            with open(filename, 'w') as fd:
                json.dump(data_list, fd, indent=2)
        else:
            return json.dumps(data_list, indent=2)
    else:
        print(tabulate([list(x) for x in data], headers=headers, tablefmt='simple'))
    return None


class CliCommand(abc.ABC):
    @abc.abstractmethod
    def execute_args(self, params, args, **kwargs):   # type: (VaultParams, str, ...) -> Any
        pass

    def clean_up(self):
        print('', end='\r', file=sys.stderr, flush=True)

    def requires_vault(self):
        return True


class Command(CliCommand):
    def execute(self, params, **kwargs):     # type: (VaultParams, Any) -> Any
        raise NotImplementedError()

    def execute_args(self, params, args, **kwargs):
        # type: (VaultParams, str, ...) -> Any
        try:
            d = {}
            d.update(kwargs)
            parser = self._get_parser_safe()
            args = '' if args is None else args
            if parser:
                opts = parser.parse_args(shlex.split(args))
                d.update(opts.__dict__)

            return self.execute(params, **d)
        except ParseError as e:
            logging.error(e)

    def get_parser(self):   # type: () -> Optional[argparse.ArgumentParser]
        return None

    def _ensure_parser(func):
        def _wrapper(self):
            parser = func(self)
            if parser:
                if parser.exit != suppress_exit:
                    parser.exit = suppress_exit
                if parser.error != raise_parse_exception:
                    parser.error = raise_parse_exception
            return parser
        return _wrapper

    @_ensure_parser
    def _get_parser_safe(self):
        return self.get_parser()
    _ensure_parser = staticmethod(_ensure_parser)


class VaultMixin:
    @staticmethod
    def get_vault(params):    # type: (VaultParams) -> KdbxVault
        if params.vault is None:
            raise CommandError('No vault is open. Type "open <vault file>"')
        return params.vault

    @staticmethod
    def require_entry(name, command):    # type: (Optional[str], str) -> str
        if not name:
            raise error.CommandError(command, 'Entry name is required')
        return name
