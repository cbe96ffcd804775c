#!/usr/bin/python3

import os

import gi
gi.require_version('GdkPixbuf', '2.0')
gi.require_version('Gtk', '3.0')

from gi.repository import GdkPixbuf, GLib, Gtk

from xdgmenu.menu import MENU_ICON_SIZE

FILE_ICON_SIZE = 24

def load_file_icon(path):
    if not os.path.isfile(path):
        return None

    try:
        pixbuf = GdkPixbuf.Pixbuf.new_from_file_at_scale(path, FILE_ICON_SIZE, FILE_ICON_SIZE, True)
    except GLib.Error:
        return None

    return Gtk.Image.new_from_pixbuf(pixbuf)

def resolve_icon(icon_name, icon_theme=None):
    """
    Returns a Gtk.Image for an icon name from the desktop files, or None.

    Names known to the icon theme are used first, then absolute paths to
    image files. Anything else is reported and dropped.
    """
    if not icon_name:
        return None

    if icon_theme is None:
        icon_theme = Gtk.IconTheme.get_default()

    image = None
    if icon_theme.has_icon(icon_name):
        image = Gtk.Image(icon_name=icon_name, pixel_size=MENU_ICON_SIZE)
    elif os.path.isabs(icon_name):
        image = load_file_icon(icon_name)

    if image is None:
        print(f'Icon not found: {icon_name}')

    return image
