#  _        _  _
# | |__  __| || |__ __ __
# | / / / _` || '_ \\ \ /
# |_\_\ \__,_||_.__//_\_\
#
# KDBX Commander
# Copyright 2026 KDBX Commander contributors
#

import re
from collections import OrderedDict
from typing import List, Iterator, Tuple

PASSWORD_FIELD = 'Password'
USERNAME_FIELD = 'UserName'
URL_FIELD = 'URL'
PASSWORD_MASK = '*' * 13

UNLOCK_PROMPT_PATTERN = re.compile(r'^(Enter|Insert) password to unlock')


def strip_unlock_prompt(text):    # type: (str) -> str
    """Remove the lines the vault tool prints while asking for the master password."""
    lines = text.split('\n')
    return '\n'.join(x for x in lines if not UNLOCK_PROMPT_PATTERN.match(x))


def parse_entry_list(text):    # type: (str) -> List[str]
    """Split `ls` output into entry paths.

    Order, duplicates and count are kept as printed by the vault tool. A
    trailing newline yields exactly one empty element, which is dropped.
    """
    entries = text.split('\n')
    if entries and entries[-1] == '':
        entries.pop()
    return entries


def split_field_line(line):    # type: (str) -> Tuple[str, str]
    name, sep, value = line.partition(':')
    if not sep:
        raise ValueError(line)
    if value.startswith(' '):
        value = value[1:]
    return name, value


class FieldSet:
    """Field name to value mapping of one `show` call"""

    def __init__(self):
        self._fields = OrderedDict()

    def add(self, name, value):    # type: (str, str) -> None
        if name not in self._fields:
            self._fields[name] = value

    def get(self, name):    # type: (str) -> str
        return self._fields.get(name, '')

    def names(self):    # type: () -> List[str]
        return list(self._fields.keys())

    def items(self):    # type: () -> Iterator[Tuple[str, str]]
        return iter(self._fields.items())

    def __contains__(self, name):
        return name in self._fields

    def __len__(self):
        return len(self._fields)

    def __repr__(self):
        return 'FieldSet(fields={})'.format(self.names())


def parse_field_set(text):    # type: (str) -> FieldSet
    fields = FieldSet()
    for line in text.split('\n'):
        if not line:
            continue
        try:
            name, value = split_field_line(line)
        except ValueError:
            continue
        fields.add(name, value)
    return fields


def mask_password(text, mask=PASSWORD_MASK):    # type: (str, str) -> str
    lines = text.split('\n')
    for i, line in enumerate(lines):
        name, sep, _ = line.partition(':')
        if sep and name == PASSWORD_FIELD:
            lines[i] = f'{name}: {mask}'
    return '\n'.join(lines)
