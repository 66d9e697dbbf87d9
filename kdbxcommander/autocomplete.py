#  _        _  _
# | |__  __| || |__ __ __
# | / / / _` || '_ \\ \ /
# |_\_\ \__,_||_.__//_\_\
#
# KDBX Commander
# Copyright 2026 KDBX Commander contributors
#

import logging

from prompt_toolkit.completion import Completion, Completer

from .commands import commands
from .params import VaultParams
from .subfolder import is_group, entry_name

group_commands = {'cd', 'tree'}
entry_commands = {'show', 'get', 'password', 'username', 'url', 'ls'}


def unescape_string(have_initial_double_quote, string):
    """Remove escape sequences; return a literal string for matching."""
    if have_initial_double_quote:
        tuple_ = (
            ('\\"', '"'),
            ('\\\\', '\\'),
        )
    else:
        tuple_ = (
            ('\\ ', ' '),
            ('\\"', '"'),
            (r"\'", "'"),
            ('\\\\', '\\'),
        )
    for from_str, to_str in tuple_:
        string = string.replace(from_str, to_str)
    return string


def escape_string(have_initial_double_quote, string):
    """Replace special characters in string, for interactive shell quoting, as part of tab-completion."""
    if have_initial_double_quote:
        tuple_ = (
            ('\\', '\\\\'),
            ('"', r'\"'),
        )
    else:
        tuple_ = (
            ('\\', '\\\\'),
            ("'", r"\'"),
            (' ', r'\ '),
            ('"', r'\"'),
        )
    for from_str, to_str in tuple_:
        string = string.replace(from_str, to_str)
    return string


class CommandCompleter(Completer):
    def __init__(self, params, aliases):
        # type: (CommandCompleter, VaultParams, dict) -> None
        Completer.__init__(self)
        self.params = params
        self.commands = commands
        self.aliases = aliases

    def get_listing(self):
        vault = self.params.vault
        if vault is None:
            return []
        entries = vault.cached_listing()
        if not entries and vault.session.is_unlocked:
            entries = vault.list_current_group()
        return entries

    def get_completions(self, document, complete_event):
        try:
            if not document.is_cursor_at_the_end:
                return
            pos = document.text.find(' ')
            if pos == -1:
                cmds = [x for x in self.commands if x.startswith(document.text)]
                cmds.extend(x for x in self.aliases if x.startswith(document.text))
                for c in sorted(cmds):
                    yield Completion(c, start_position=-len(document.text))
                return

            cmd = document.text[:pos]
            if cmd in self.aliases:
                cmd = self.aliases[cmd]
            if cmd not in group_commands and cmd not in entry_commands:
                return

            raw_input = document.text[pos + 1:].lstrip()
            have_initial_double_quote = bool(raw_input) and raw_input[0] == '"'
            word = raw_input.rsplit(' ', 1)[-1] if not have_initial_double_quote else raw_input[1:]
            if word.startswith('-'):
                return
            prefix = unescape_string(have_initial_double_quote, word)
            for path in self.get_listing():
                if cmd in group_commands and not is_group(path):
                    continue
                name = entry_name(path) + ('/' if is_group(path) else '')
                if name.casefold().startswith(prefix.casefold()) and len(prefix) < len(name):
                    text = escape_string(have_initial_double_quote, name)
                    display = text if len(text) <= 39 else text[:29] + '...' + text[-7:]
                    yield Completion(text=text, display=display, start_position=-len(word))
        except Exception as e:
            logging.debug('Completion exception: %s', e)
