# -*- coding: utf-8 -*-
#  _        _  _
# | |__  __| || |__ __ __
# | / / / _` || '_ \\ \ /
# |_\_\ \__,_||_.__//_\_\
#
# KDBX Commander
# Copyright 2026 KDBX Commander contributors
#

import argparse
import json
import logging
import os
import shlex
import sys
from pathlib import Path
from typing import Optional

from . import __version__
from . import cli
from .params import VaultParams
from .vault import is_vault_file


def get_params_from_config(config_filename=None):    # type: (Optional[str]) -> VaultParams
    if os.getenv('KDBX_COMMANDER_DEBUG'):
        logging.getLogger().setLevel(logging.DEBUG)
        logging.info('Debug ON')

    def get_env_config():
        path = os.getenv('KDBX_COMMANDER_CONFIG')
        if path:
            logging.debug('Setting config file from KDBX_COMMANDER_CONFIG env variable %s', path)
        return path

    def get_default_path():
        default_path = Path.home().joinpath('.kdbxcommander')
        default_path.mkdir(parents=True, exist_ok=True)
        return default_path

    config_filename = config_filename or get_env_config()
    if not config_filename:
        config_filename = 'config.json'
        if os.path.isfile(config_filename):
            config_filename = os.path.join(os.getcwd(), config_filename)
        else:
            config_filename = os.path.join(get_default_path(), config_filename)
    else:
        config_filename = os.path.expanduser(config_filename)

    params = VaultParams(config_filename=config_filename)
    if os.path.exists(config_filename):
        try:
            try:
                with open(params.config_filename) as config_file:
                    params.config = json.load(config_file)
                params.load_config_properties()
            except Exception as e:
                logging.error('Unable to parse JSON configuration file "%s"', os.path.abspath(params.config_filename))
                answer = input('Do you want to delete it (y/N): ')
                if answer in ['y', 'Y']:
                    os.remove(params.config_filename)
                else:
                    raise e
        except IOError as ioe:
            logging.warning('Error: Unable to open config file %s: %s', params.config_filename, ioe)

    return params


def usage(m):
    print(m)
    parser.print_help()
    cli.display_command_help(show_shell=True)
    sys.exit(1)


parser = argparse.ArgumentParser(prog='kdbx', add_help=False, allow_abbrev=False)
parser.add_argument('--version', dest='version', action='store_true', help='Display version')
parser.add_argument('--config', dest='config', action='store', help='Config file to use')
parser.add_argument('--debug', dest='debug', action='store_true',
                    help='Turn on debug mode. Vault tool output, including secrets, is logged')
parser.add_argument('--batch-mode', dest='batch_mode', action='store_true', help='Run commander in batch or basic UI mode.')
parser.add_argument('--cli', dest='keepassxc_cli', action='store', help='Path to keepassxc-cli')
parser.add_argument('--recursive', dest='recursive', action='store_true', help='List groups recursively')
no_enforce_help = 'Report a rejected master password instead of asking for it again'
parser.add_argument('--no-enforce-password', dest='no_enforce_password', action='store_true', help=no_enforce_help)
parser.add_argument('--unmask', dest='unmask', action='store_true', help='Display passwords in "show" output')
parser.add_argument('vault', nargs='?', type=str, action='store', help='KeePass vault file (.kdbx, .kdb)')
parser.add_argument('command', nargs='?', type=str, action='store', help='Command')
parser.add_argument('options', nargs='*', action='store', help='Options')
parser.error = usage


def main():
    logging.basicConfig(format='%(message)s')

    opts, flags = parser.parse_known_args(sys.argv[1:])
    if opts.version:
        print(f'KDBX Commander, version {__version__}')
        return

    if flags and len(flags) > 0:
        if flags[0] in ('-h', '--help'):
            usage('')

    params = get_params_from_config(opts.config)

    if opts.batch_mode:
        params.batch_mode = True
    if opts.debug:
        params.debug = True
    if opts.keepassxc_cli:
        params.keepassxc_cli = opts.keepassxc_cli
    if opts.recursive:
        params.recursive_listing = True
    if opts.no_enforce_password:
        params.enforce_valid_password = False
    if opts.unmask:
        params.unmask_all = True

    pwd = os.getenv('KDBX_PASSWORD')
    if pwd:
        params.password = pwd

    if opts.vault:
        if opts.vault == '-':
            params.batch_mode = True
        elif not is_vault_file(opts.vault) and os.path.isfile(opts.vault) and not opts.command:
            with open(opts.vault, 'r') as f:
                params.commands.extend([x.strip() for x in f.readlines()])
            params.commands.append('q')
            params.batch_mode = True
        else:
            params.vault_file = os.path.expanduser(opts.vault)

    if opts.command:
        options = ' '.join([shlex.quote(x) for x in opts.options]) if opts.options else ''
        flags = ' '.join([shlex.quote(x) for x in flags]) if flags else ''
        command = ' '.join(x for x in [opts.command, options, flags] if x)
        params.commands.append(command)
        params.commands.append('q')
        params.batch_mode = True

    logging.getLogger().setLevel(logging.WARNING if params.batch_mode else logging.DEBUG if params.debug else logging.INFO)
    errno = cli.loop(params)
    sys.exit(errno)


if __name__ == '__main__':
    main()
