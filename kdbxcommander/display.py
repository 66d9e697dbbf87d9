#  _        _  _
# | |__  __| || |__ __ __
# | / / / _` || '_ \\ \ /
# |_\_\ \__,_||_.__//_\_\
#
# KDBX Commander
# Copyright 2026 KDBX Commander contributors
#
import re
import shutil
from collections import OrderedDict
from typing import List, Iterable

from asciitree import LeftAligned, BoxStyle, drawing
from colorama import init, Fore, Style
from tabulate import tabulate

from . import __version__
from .subfolder import is_group, PathDelimiter

init()


class bcolors:
    HEADER = '\033[95m'
    OKBLUE = '\033[94m'
    OKGREEN = '\033[92m'
    WARNING = '\033[93m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'
    UNDERLINE = '\033[4m'
    WHITE = '\033[0;37m'


def welcome():
    lines = [
        r'  _        _  _                                          _         ',
        r' | |__  __| || |__ __ __   __  ___  _ __   _ __   __ _  _ _   __| | ___  _ _ ',
        r" | / / / _` || '_ \\ \ /  / _|/ _ \| '  \ | '  \ / _` || ' \ / _` |/ -_)| '_|",
        r' |_\_\ \__,_||_.__//_\_\  \__|\___/|_|_|_||_|_|_|\__,_||_||_|\__,_|\___||_|  ',
        '',
    ]
    try:
        width = shutil.get_terminal_size(fallback=(160, 50)).columns
    except OSError:
        width = 160
    print(Style.RESET_ALL)
    for line in lines:
        if len(line) > width:
            line = line[:width]
        print(Fore.LIGHTGREEN_EX + line)
    print(Fore.LIGHTBLACK_EX + f'{("v" + __version__):>78}\n' + Style.RESET_ALL)


def colorize_entry(path):    # type: (str) -> str
    if is_group(path):
        return f'{Style.BRIGHT}{Fore.BLUE}{path}{Style.RESET_ALL}'
    return path


def formatted_entries(entries, **kwargs):    # type: (List[str], ...) -> None
    """Display groups and entries of a listing in vault tool order"""
    if kwargs.get('short'):
        for path in entries:
            print(colorize_entry(path))
        return

    table = [[i + 1, colorize_entry(x), 'Group' if is_group(x) else 'Entry'] for i, x in enumerate(entries)]
    print(tabulate(table, headers=['#', 'Name', 'Type']))


def formatted_entry(details):    # type: (str) -> None
    print('')
    for line in details.split('\n'):
        name, sep, value = line.partition(':')
        if sep:
            print('{0:>20s}: {1}'.format(name, value.lstrip(' ')))
        elif line:
            print('{0:>20s}  {1}'.format('', line))
    print('')


def build_tree(entries, prefix=''):    # type: (Iterable[str], str) -> OrderedDict
    tree = OrderedDict()
    for path in entries:
        if prefix and path.startswith(prefix):
            path = path[len(prefix):]
        components = [x for x in path.split(PathDelimiter) if x]
        node = tree
        for i, component in enumerate(components):
            last = i == len(components) - 1
            name = component if last and not is_group(path) else component + PathDelimiter
            if name not in node:
                node[name] = OrderedDict()
            node = node[name]
    return tree


def formatted_tree(entries, root_name, prefix=''):    # type: (Iterable[str], str, str) -> None
    tree = {root_name: build_tree(entries, prefix)}
    tr = LeftAligned(draw=BoxStyle(gfx=drawing.BOX_LIGHT))
    tree_txt = tr(tree)
    tree_txt = re.sub(r'[ \t]+$', '', tree_txt, flags=re.MULTILINE)
    print(tree_txt)
    print('')


def formatted_history(history):
    """ Show the history of commands"""

    if not history:
        return

    print('')
    print('Command history:')
    print('----------------')

    for h in history:
        print(h)

    print('')
