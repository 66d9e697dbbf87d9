#  _        _  _
# | |__  __| || |__ __ __
# | / / / _` || '_ \\ \ /
# |_\_\ \__,_||_.__//_\_\
#
# KDBX Commander
# Copyright 2026 KDBX Commander contributors
#

import fnmatch
import logging
import os
from typing import Dict, List, Optional, Tuple

from . import parser
from .parser import FieldSet, PASSWORD_FIELD, USERNAME_FIELD, URL_FIELD
from .session import VaultSession
from .subfolder import GroupPath, entry_name

VAULT_FILE_EXTENSIONS = ('.kdbx', '.kdb')

LIST_COMMAND = 'ls'
SHOW_COMMAND = 'show'
RECURSIVE_LIST_OPTIONS = ('-R', '-f')
SHOW_PROTECTED_OPTIONS = ('-s',)


def is_vault_file(filename):    # type: (str) -> bool
    _, ext = os.path.splitext(filename or '')
    return ext.lower() in VAULT_FILE_EXTENSIONS


class KdbxVault:
    """Queries against one open vault, relative to the current group."""

    def __init__(self, session, recursive=False, group_path=None):
        # type: (VaultSession, bool, Optional[GroupPath]) -> None
        self.session = session
        self.recursive = recursive
        self.group_path = group_path or GroupPath()
        self.listing_cache = {}    # type: Dict[Tuple[str, bool], List[str]]
        if not is_vault_file(session.database):
            logging.warning('"%s" does not look like a KeePass vault file', session.database)

    @property
    def name(self):    # type: () -> str
        return os.path.basename(self.session.database)

    @property
    def current_group(self):    # type: () -> str
        return self.group_path.path

    def list_current_group(self):    # type: () -> List[str]
        options = RECURSIVE_LIST_OPTIONS if self.recursive else ()
        output = self.session.execute(LIST_COMMAND, self.group_path.resolve(), options)
        entries = parser.parse_entry_list(output)
        self.listing_cache[self._cache_key()] = entries
        return entries

    def _cache_key(self):    # type: () -> Tuple[str, bool]
        return self.group_path.resolve(), self.recursive

    def cached_listing(self):    # type: () -> List[str]
        return self.listing_cache.get(self._cache_key()) or []

    def list_recursive(self):    # type: () -> List[str]
        output = self.session.execute(LIST_COMMAND, self.group_path.resolve(), RECURSIVE_LIST_OPTIONS)
        return parser.parse_entry_list(output)

    def get_fields(self, name):    # type: (str) -> FieldSet
        output = self.session.execute(SHOW_COMMAND, self.group_path.resolve(name), SHOW_PROTECTED_OPTIONS)
        return parser.parse_field_set(output)

    def get_field(self, name, field_name):    # type: (str, str) -> str
        return self.get_fields(name).get(field_name)

    def get_password(self, name):
        return self.get_field(name, PASSWORD_FIELD)

    def get_username(self, name):
        return self.get_field(name, USERNAME_FIELD)

    def get_url(self, name):
        return self.get_field(name, URL_FIELD)

    def get_entry_details(self, name, unmask=False):    # type: (str, bool) -> str
        if unmask:
            options = SHOW_PROTECTED_OPTIONS
        else:
            options = ()
        output = self.session.execute(SHOW_COMMAND, self.group_path.resolve(name), options)
        return output if unmask else parser.mask_password(output)

    def find_entries(self, pattern):    # type: (str) -> List[str]
        entries = self.list_current_group()
        if not pattern:
            return entries
        pattern = pattern.casefold()
        if any(x in pattern for x in '*?['):
            return [x for x in entries if fnmatch.fnmatch(entry_name(x).casefold(), pattern)]
        return [x for x in entries if pattern in x.casefold()]

    def enter_group(self, name):    # type: (str) -> str
        return self.group_path.descend(name)

    def go_back(self):    # type: () -> str
        return self.group_path.ascend()

    def go_root(self):
        self.group_path.reset()
