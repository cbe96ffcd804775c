#!/usr/bin/python3

import traceback
from setproctitle import setproctitle

import gi
gi.require_version('Gdk', '3.0')
gi.require_version('Gtk', '3.0')
gi.require_version('XApp', '1.0')

from gi.repository import Gdk, Gio, GLib, Gtk, XApp

from xdgmenu.widget import menu_widget_new

APPLICATION_ID = 'org.x.xdgmenu'
SCHEMA = 'org.x.xdgmenu'

def get_settings():
    # the applet still runs from a source checkout where the schema is not compiled
    source = Gio.SettingsSchemaSource.get_default()
    if source is None or source.lookup(SCHEMA, True) is None:
        return None

    return Gio.Settings(schema_id=SCHEMA)

class MenuApp(Gtk.Application):
    def __init__(self):
        super(MenuApp, self).__init__(application_id=APPLICATION_ID, flags=Gio.ApplicationFlags.FLAGS_NONE)

        self.has_activated = False
        self.prefix = None

        self.add_main_option('prefix', ord('p'), GLib.OptionFlags.NONE, GLib.OptionArg.STRING,
                             'Menu file prefix, e.g. "gnome-" for gnome-applications.menu', 'PREFIX')

    def do_handle_local_options(self, options):
        if options.contains('prefix'):
            self.prefix = options.lookup_value('prefix', GLib.VariantType.new('s')).get_string()

        return -1

    def get_prefix(self):
        if self.prefix is not None:
            return self.prefix

        settings = get_settings()
        if settings is not None and settings.get_string('menu-prefix') != '':
            return settings.get_string('menu-prefix')

        # falls back to $XDG_MENU_PREFIX
        return None

    def do_activate(self):
        try:
            if self.has_activated:
                self.window.present()

                return

            Gtk.Application.do_activate(self)

            self.window = Gtk.ApplicationWindow(application=self, title='Applications', decorated=False,
                                                skip_taskbar_hint=True, type_hint=Gdk.WindowTypeHint.DOCK)
            self.window.add(menu_widget_new(self.get_prefix()))

            self.status_icon = XApp.StatusIcon(name='xdgmenu')
            self.status_icon.set_icon_name('applications-other-symbolic')
            self.status_icon.connect('activate', self.on_status_icon_activate)

            self.context_menu = Gtk.Menu()

            item = Gtk.MenuItem(label='Quit', visible=True)
            item.connect('activate', self.exit)
            self.context_menu.append(item)

            self.status_icon.set_secondary_menu(self.context_menu)

            self.window.show_all()

            self.has_activated = True

            self.hold()

        except Exception as e:
            traceback.print_exc()
            self.quit()

    def on_status_icon_activate(self, icon, button, time):
        if self.window.is_visible():
            self.window.hide()
        else:
            self.window.present()

    def exit(self, *args):
        self.quit()

if __name__ == '__main__':
    setproctitle('xdgmenu')
    app = MenuApp()
    app.run()
