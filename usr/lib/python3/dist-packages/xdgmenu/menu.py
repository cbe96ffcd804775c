#!/usr/bin/python3

import gi
gi.require_version('Gtk', '3.0')

from gi.repository import Gtk

# width reserved for the icon slot so labels line up with or without an icon
MENU_ICON_SIZE = 16

class _Placeholder(Gtk.Bin):
    def __init__(self):
        super(_Placeholder, self).__init__(width_request=MENU_ICON_SIZE)

class IconMenuItem(Gtk.MenuItem):
    """
    A menu item showing an optional image to the left of its label.

    Gtk.ImageMenuItem is deprecated in GTK 3, so the item packs its own box
    with a placeholder for the image and a label.
    """

    def __init__(self, label='', **kwargs):
        super(IconMenuItem, self).__init__(**kwargs)

        self.image = None

        self.get_style_context().add_class('xdg-menu-item')

        self.content_box = Gtk.Box(spacing=7, halign=Gtk.Align.START)
        self.add(self.content_box)

        self.left_content = _Placeholder()
        self.content_box.pack_start(self.left_content, False, False, 0)

        self._label = Gtk.Label(label=label, xalign=0)
        self.content_box.pack_start(self._label, False, False, 0)

    def set_label(self, label):
        self._label.set_label(label)

    def get_label(self):
        return self._label.get_label()

    def set_image(self, image):
        if self.image is not None:
            self.left_content.remove(self.image)

        self.image = image

        if image is not None:
            self.left_content.add(image)

    def get_image(self):
        return self.image
