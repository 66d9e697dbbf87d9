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
import re
import shlex
from pathlib import Path
from typing import Union

from prompt_toolkit import PromptSession
from prompt_toolkit.enums import EditingMode
from prompt_toolkit.shortcuts import CompleteStyle

from . import display
from .autocomplete import CommandCompleter
from .commands import register_commands, aliases, commands, command_info
from .commands.base import CliCommand
from .commands.utils import OpenCommand
from .display import bcolors
from .error import CommandError, Error
from .params import VaultParams

current_command = None  # type: Union[None, CliCommand]
stack = []
register_commands(commands, aliases, command_info)


def display_command_help(show_shell=False):
    alias_lookup = {x[1]: x[0] for x in aliases.items()}

    print(f'\n{bcolors.BOLD}{bcolors.UNDERLINE}Commands:{bcolors.ENDC}')
    cmd_display_list = []
    for cmd, description in command_info.items():
        alias = alias_lookup.get(cmd) or ''
        alias_str = f' ({alias})' if alias else ''
        cmd_display_list.append((f'{cmd}{alias_str}', description))
    if show_shell:
        cmd_display_list.extend([
            ('debug', 'Toggle debug mode.'),
            ('clear (c)', 'Clear the screen.'),
            ('history (h)', 'Show command history.'),
            ('quit (q)', 'Quit.')
        ])
    max_cmd_width = max(len(x[0]) for x in cmd_display_list)
    for cmd_display, description in cmd_display_list:
        print(f'  {bcolors.BOLD}{cmd_display:<{max_cmd_width}}{bcolors.ENDC}   {description}')

    print(f'\n{bcolors.UNDERLINE}Usage:{bcolors.ENDC}')
    print(f"Type '{bcolors.BOLD}<command> -h{bcolors.ENDC}' to display help on a specific command")


def command_and_args_from_cmd(command_line):
    args = ''
    pos = command_line.find(' ')
    if pos > 0:
        cmd = command_line[:pos]
        args = command_line[pos + 1:].strip()
    else:
        cmd = command_line.strip()

    return cmd, args


def do_command(params, command_line):    # type: (VaultParams, str) -> any
    if command_line.lower() == 'h' or command_line.lower() == 'history':
        display.formatted_history(stack)
        return

    # Track commands history
    if len(stack) == 0 or stack[0] != command_line:
        stack.insert(0, command_line)

    if command_line.lower() == 'c' or command_line.lower() == 'cls' or command_line.lower() == 'clear':
        print(chr(27) + "[2J")

    elif command_line.startswith('debug'):
        tokens = shlex.split(command_line)
        debug_manager.process_command(tokens, params.batch_mode)

    else:
        cmd, args = command_and_args_from_cmd(command_line)
        if cmd:
            orig_cmd = cmd
            if cmd in aliases and cmd not in commands:
                cmd = aliases[cmd]

            if cmd in commands:
                command = commands.get(cmd)
                global current_command
                current_command = command

                if command.requires_vault() and params.vault is None:
                    if not params.vault_file:
                        raise CommandError(orig_cmd, 'No vault is open. Type "open <vault file>"')
                    OpenCommand().execute(params, vault=params.vault_file)

                return command.execute_args(params, args, command=orig_cmd)
            else:
                display_command_help(show_shell=not params.batch_mode)


class DebugManager:
    """Debug manager for console and file logging."""

    def __init__(self):
        self.logger = logging.getLogger()

    def is_console_debug_on(self):
        return self.logger.level == logging.DEBUG

    def setup_file_logging(self, file_path):
        try:
            path = Path(os.path.expanduser(file_path)).resolve()
            if not path.name or path.name in ('.', '..'):
                raise ValueError('Invalid filename')
            os.makedirs(path.parent, mode=0o750, exist_ok=True)

            for h in list(self.logger.handlers):
                if getattr(h, '_debug_file', False):
                    self.logger.removeHandler(h)
                    h.close()

            fh = logging.FileHandler(str(path), mode='a', encoding='utf-8')
            fh.setLevel(logging.DEBUG)
            fh.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(name)s - %(message)s'))
            fh._debug_file = True
            self.logger.addHandler(fh)
            self.logger.setLevel(logging.DEBUG)
            logging.info('Debug file logging enabled: %s', path)
            return True
        except (ValueError, OSError) as e:
            logging.error('Failed to setup file logging: %s', e)
            return False

    def toggle_console_debug(self, batch_mode):
        new_state = not self.is_console_debug_on()
        level = logging.DEBUG if new_state else (logging.WARNING if batch_mode else logging.INFO)
        self.logger.setLevel(level)
        logging.info('Debug %s', 'ON' if new_state else 'OFF')
        return new_state

    def process_command(self, tokens, batch_mode):
        file_path = None
        for i, token in enumerate(tokens[1:], 1):
            if token == '--file':
                if i + 1 < len(tokens):
                    file_path = tokens[i + 1]
                else:
                    print('Please specify the file path for logging to file: debug --file <file_path>')
                    return False
                break
            elif token.startswith('--file='):
                file_path = token.split('=', 1)[1]
                break

        if file_path:
            return self.setup_file_logging(file_path)
        self.toggle_console_debug(batch_mode)
        return True


debug_manager = DebugManager()


def read_command_with_continuation(prompt_session, params):
    """Read command with support for line continuation using backslash."""
    command_lines = []
    continuation_prompt = '... '
    current_prompt = get_prompt(params)

    while True:
        if prompt_session is not None:
            line = prompt_session.prompt(current_prompt)
        else:
            line = input(current_prompt)

        stripped_line = line.rstrip()
        if stripped_line.endswith('\\'):
            line_content = stripped_line[:-1].strip()
            if line_content:
                command_lines.append(line_content)
            current_prompt = continuation_prompt
        else:
            line_content = stripped_line
            if line_content:
                command_lines.append(line_content)
            break

    result = ' '.join(command_lines)
    return re.sub(r'\s+', ' ', result).strip()


def loop(params):  # type: (VaultParams) -> int
    global current_command
    error_no = 0
    suppress_errno = False

    logging.getLogger().setLevel(logging.DEBUG if params.debug else logging.WARNING if params.batch_mode else logging.INFO)
    prompt_session = None
    if not params.batch_mode:
        if os.isatty(0) and os.isatty(1):
            completer = CommandCompleter(params, aliases)
            prompt_session = PromptSession(multiline=False,
                                           editing_mode=EditingMode.VI,
                                           completer=completer,
                                           complete_style=CompleteStyle.MULTI_COLUMN,
                                           complete_while_typing=False)

        display.welcome()

        if params.vault_file:
            try:
                OpenCommand().execute(params, vault=params.vault_file)
            except KeyboardInterrupt:
                print('')
            except EOFError:
                return 0
            except Error as e:
                logging.error('%s', e)
        else:
            logging.info('To open a vault type: open <vault file>')

    while True:
        command = ''
        if len(params.commands) > 0:
            command = params.commands[0].strip()
            params.commands = params.commands[1:]

        try:
            if not command:
                command = read_command_with_continuation(prompt_session, params)

            if command.lower() == 'q' or command.lower() == 'quit':
                break

            suppress_errno = False
            command = command.strip()
            if command.startswith('@'):
                suppress_errno = True
                command = command[1:]
            if params.batch_mode:
                logging.info('> %s', command)
            error_no = 1
            result = do_command(params, command)
            error_no = 0
            if result:
                print(result)
        except EOFError:
            break
        except KeyboardInterrupt:
            pass
        except CommandError as e:
            if e.command:
                logging.warning('%s: %s', e.command, e.message)
            else:
                logging.warning('%s', e.message)
        except Error as e:
            logging.error('%s', e)
        except Exception as e:
            logging.debug(e, exc_info=True)
            logging.error('An unexpected error occurred: %s. Type "debug" to toggle verbose error output', e)
        finally:
            try:
                if current_command:
                    current_command.clean_up()
            finally:
                current_command = None

        if params.batch_mode and error_no != 0 and not suppress_errno:
            break

    if not params.batch_mode:
        logging.info('\nGoodbye.\n')

    params.clear_session()
    return error_no


def get_prompt(params):    # type: (VaultParams) -> str
    if params.batch_mode:
        return ''

    if params.vault is None:
        return 'No vault> '

    prompt = params.vault.group_path.display_name(params.vault.name)
    if len(prompt) > 40:
        prompt = '...' + prompt[-37:]

    return prompt + '> '
