#!/usr/bin/python3

"""
A menu bar holding all applications of the XDG "Desktop Menu Specification"
menu, see https://specifications.freedesktop.org/menu-spec/menu-spec-1.1.html

    from xdgmenu.widget import menu_widget_new
    menu_bar = menu_widget_new('gnome-')

The menu is read from PREFIX-applications.menu in the "menus" subdirectory
of $XDG_CONFIG_HOME and $XDG_CONFIG_DIRS. Without a prefix the value of
$XDG_MENU_PREFIX is used.
"""

import subprocess

import gi
gi.require_version('Gtk', '3.0')

from gi.repository import Gtk

from xdgmenu.icons import resolve_icon
from xdgmenu.menu import IconMenuItem
from xdgmenu.tree import build_menu

def launch(command):
    print(f"Launching '{command}'")
    subprocess.Popen(command, shell=True, start_new_session=True)

def on_item_activate(item, command):
    launch(command)

def add_item(shell, entry):
    item = IconMenuItem(label=entry.name)
    if entry.comment is not None:
        item.set_tooltip_text(entry.comment)
    item.set_image(resolve_icon(entry.icon))
    shell.append(item)

    item.connect('activate', on_item_activate, entry.command)

def add_contents(shell, node):
    for child in node.children:
        add_menu(shell, child)

    for entry in node.entries:
        add_item(shell, entry)

def add_menu(shell, node):
    if node.is_empty():
        return

    item = IconMenuItem(label=node.name)
    item.set_image(resolve_icon(node.icon))
    shell.append(item)

    submenu = Gtk.Menu()
    item.set_submenu(submenu)

    add_contents(submenu, node)

def menu_widget_new(prefix=None):
    menu_bar = Gtk.MenuBar()

    root = build_menu(prefix)
    add_contents(menu_bar, root)

    menu_bar.show_all()

    return menu_bar
