#  _        _  _
# | |__  __| || |__ __ __
# | / / / _` || '_ \\ \ /
# |_\_\ \__,_||_.__//_\_\
#
# KDBX Commander
# Copyright 2026 KDBX Commander contributors
#

from .base import register_commands, aliases, commands, command_info

__all__ = ['register_commands', 'aliases', 'commands', 'command_info']
