#!/usr/bin/python3

import os
import re
import shlex

import xdg.Menu
from xdg import BaseDirectory
from xdg.Exceptions import ParsingError

MENU_FILE_NAME = 'applications.menu'

FIELD_CODE_REGEX = re.compile(r'%(.)')
# codes that expand to file or url arguments, which a menu launch never has
DROPPED_FIELD_CODES = 'fFuUdDnNvm'

class MenuError(Exception):
    pass

class MenuEntry(object):
    __slots__ = ('name', 'comment', 'icon', 'command', 'filename')

    def __init__(self, name, command, comment=None, icon=None, filename=None):
        self.name = name
        self.command = command
        self.comment = comment
        self.icon = icon
        self.filename = filename

    def __repr__(self):
        return f'MenuEntry({self.name!r}, {self.command!r})'

class MenuNode(object):
    __slots__ = ('name', 'icon', 'children', 'entries')

    def __init__(self, name, icon=None, children=(), entries=()):
        self.name = name
        self.icon = icon
        self.children = tuple(children)
        self.entries = tuple(entries)

    def __repr__(self):
        return f'MenuNode({self.name!r}, children={len(self.children)}, entries={len(self.entries)})'

    def is_empty(self):
        return not self.children and not self.entries

def expand_exec(exec_line, name='', icon=None, filename=None):
    """
    Turns the Exec key of a desktop entry into a shell command line.

    See the "The Exec key" section of the Desktop Entry Specification for the
    meaning of the field codes.
    """
    def replace(match):
        code = match.group(1)
        if code == '%':
            return '%'
        if code == 'i':
            return f'--icon {shlex.quote(icon)}' if icon else ''
        if code == 'c':
            return shlex.quote(name)
        if code == 'k':
            return shlex.quote(filename) if filename else ''
        if code in DROPPED_FIELD_CODES:
            return ''

        return match.group(0)

    return FIELD_CODE_REGEX.sub(replace, exec_line).strip()

def entry_from_xdg(menu_entry):
    desktop_entry = menu_entry.DesktopEntry

    name = desktop_entry.getName()
    icon = desktop_entry.getIcon() or None
    filename = desktop_entry.getFileName()
    command = expand_exec(desktop_entry.getExec(), name, icon, filename)

    return MenuEntry(name, command, comment=desktop_entry.getComment() or None, icon=icon, filename=filename)

def node_from_xdg(menu):
    children = []
    entries = []
    for item in menu.Entries:
        # pyxdg keeps hidden, deleted and empty items around with Show set to the reason
        if getattr(item, 'Show', False) is not True:
            continue

        if isinstance(item, xdg.Menu.Menu):
            children.append(node_from_xdg(item))
        elif isinstance(item, xdg.Menu.MenuEntry):
            entries.append(entry_from_xdg(item))

    return MenuNode(menu.getName(), icon=menu.getIcon() or None, children=children, entries=entries)

def get_menu_file(prefix=None):
    if prefix is None:
        prefix = os.environ.get('XDG_MENU_PREFIX', '')

    name = prefix + MENU_FILE_NAME
    path = BaseDirectory.load_first_config('menus', name)
    if path is None or not os.path.isfile(path):
        raise MenuError(f'Menu file {name} not found in {", ".join(BaseDirectory.xdg_config_dirs)}')

    return path

def build_menu(prefix=None):
    """
    Parses the applications menu for the given prefix, e.g. 'gnome-' or
    'mate-', into a tree of MenuNode and MenuEntry objects. When no prefix is
    given, $XDG_MENU_PREFIX is used.
    """
    path = get_menu_file(prefix)

    try:
        menu = xdg.Menu.parse(path)
    except ParsingError as e:
        raise MenuError(f'Unable to parse {path}: {e}') from e

    return node_from_xdg(menu)
