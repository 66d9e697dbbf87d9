# -*- coding: utf-8 -*-
#  _        _  _
# | |__  __| || |__ __ __
# | / / / _` || '_ \\ \ /
# |_\_\ \__,_||_.__//_\_\
#
# KDBX Commander
# Copyright 2026 KDBX Commander contributors
#

__version__ = '1.2'
