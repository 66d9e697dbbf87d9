#  _        _  _
# | |__  __| || |__ __ __
# | / / / _` || '_ \\ \ /
# |_\_\ \__,_||_.__//_\_\
#
# KDBX Commander
# Copyright 2026 KDBX Commander contributors
#
import re
from typing import List

PathDelimiter = '/'

_LAST_SEGMENT = re.compile(r'[^/]*/?$')


def is_group(path):    # type: (str) -> bool
    """Return True iff path names a group rather than an entry."""
    return isinstance(path, str) and path.endswith(PathDelimiter)


def is_abs_path(path_string):
    """Return True iff path_string is an absolute path."""
    return path_string.startswith(PathDelimiter)


def entry_name(path):    # type: (str) -> str
    """Last component of an entry or group path, without the group suffix."""
    name = path[:-1] if is_group(path) else path
    pos = name.rfind(PathDelimiter)
    return name[pos + 1:] if pos >= 0 else name


class GroupPath:
    """Current location inside the vault, '' being the root group.

    Every segment is followed by '/', so the path is always a prefix that can
    be concatenated with a group or entry name.
    """

    def __init__(self, path=''):
        self._path = ''
        if path:
            for segment in path.strip(PathDelimiter).split(PathDelimiter):
                self.descend(segment)

    @property
    def path(self):    # type: () -> str
        return self._path

    @property
    def segments(self):    # type: () -> List[str]
        return [x for x in self._path.split(PathDelimiter) if x]

    @property
    def is_root(self):    # type: () -> bool
        return self._path == ''

    def resolve(self, name=''):    # type: (str) -> str
        return self._path + (name or '')

    def descend(self, segment):    # type: (str) -> str
        if not segment:
            return self._path
        if not is_group(segment):
            segment += PathDelimiter
        self._path = self.resolve(segment)
        return self._path

    def ascend(self):    # type: () -> str
        if self._path:
            self._path = _LAST_SEGMENT.sub('', self._path, count=1)
        return self._path

    def reset(self):
        self._path = ''

    def display_name(self, root_name=''):    # type: (str) -> str
        parts = [root_name] if root_name else []
        parts.extend(self.segments)
        return PathDelimiter.join(parts)

    def __str__(self):
        return self._path

    def __repr__(self):
        return 'GroupPath(path={!r})'.format(self._path)

    def __eq__(self, other):
        if isinstance(other, GroupPath):
            return self._path == other._path
        if isinstance(other, str):
            return self._path == other
        return NotImplemented

    def __hash__(self):
        return hash(self._path)
