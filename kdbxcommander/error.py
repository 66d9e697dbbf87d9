#  _        _  _
# | |__  __| || |__ __ __
# | / / / _` || '_ \\ \ /
# |_\_\ \__,_||_.__//_\_\
#
# KDBX Commander
# Copyright 2026 KDBX Commander contributors
#

class Error(Exception):
    """Base class for exceptions in this module."""
    def __init__(self, message):
        self.message = message

    def __str__(self):
        return self.message


class VaultError(Error):
    """Exception raised when the vault tool exits with a non-zero status
    """

    def __init__(self, returncode, message):
        super().__init__(message)
        self.returncode = returncode

    def __str__(self):
        return f'{self.returncode}: {self.message or ""}'


class AuthenticationFailed(VaultError):
    """The vault tool rejected the request, typically a wrong master password
    """
    pass


class VaultToolNotFound(Error):
    def __init__(self, tool, message):
        super().__init__(message)
        self.tool = tool

    def __str__(self):
        return f'{self.tool}: {self.message}'


class CommandError(Error):
    def __init__(self, command, message):
        super().__init__(message)
        self.command = command

    def __str__(self):
        if self.command:
            return f'{self.command}: {self.message}'
        else:
            return super().__str__()
