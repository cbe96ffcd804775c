"""Tests for the applet's menu prefix selection."""
import os
import pytest
from unittest.mock import MagicMock, patch
from importlib.util import spec_from_file_location, module_from_spec

gi = pytest.importorskip('gi')
pytest.importorskip('setproctitle')
try:
    gi.require_version('Gdk', '3.0')
    gi.require_version('Gtk', '3.0')
    gi.require_version('XApp', '1.0')
except ValueError:
    pytest.skip('GTK 3 or XApp is not available', allow_module_level=True)

from gi.repository import GLib

# The applet is a script outside the package, load it by path
spec = spec_from_file_location(
    "app_menu",
    os.path.join(os.path.dirname(__file__), "..", "usr", "lib", "xdgmenu", "app_menu.py")
)
app_menu = module_from_spec(spec)
spec.loader.exec_module(app_menu)


def make_settings(prefix):
    settings = MagicMock()
    settings.get_string.side_effect = lambda key: {'menu-prefix': prefix}[key]
    return settings


@pytest.fixture
def app():
    return app_menu.MenuApp()


class TestGetPrefix:
    def test_command_line_wins_over_setting(self, app):
        app.prefix = 'mate-'
        with patch.object(app_menu, 'get_settings', return_value=make_settings('gnome-')) as get_settings:
            assert app.get_prefix() == 'mate-'
        get_settings.assert_not_called()

    def test_empty_command_line_prefix_is_used(self, app):
        app.prefix = ''
        with patch.object(app_menu, 'get_settings', return_value=make_settings('gnome-')):
            assert app.get_prefix() == ''

    def test_setting_is_used(self, app):
        with patch.object(app_menu, 'get_settings', return_value=make_settings('gnome-')):
            assert app.get_prefix() == 'gnome-'

    def test_empty_setting_uses_environment(self, app):
        with patch.object(app_menu, 'get_settings', return_value=make_settings('')):
            assert app.get_prefix() is None

    def test_missing_schema_uses_environment(self, app):
        with patch.object(app_menu, 'get_settings', return_value=None):
            assert app.get_prefix() is None


class TestLocalOptions:
    def test_prefix_option(self, app):
        options = GLib.VariantDict.new(None)
        options.insert_value('prefix', GLib.Variant('s', 'xfce-'))

        assert app.do_handle_local_options(options) == -1
        assert app.prefix == 'xfce-'

    def test_no_prefix_option(self, app):
        assert app.do_handle_local_options(GLib.VariantDict.new(None)) == -1
        assert app.prefix is None


class TestGetSettings:
    def test_schema_not_installed(self):
        with patch.object(app_menu, 'Gio') as gio:
            gio.SettingsSchemaSource.get_default.return_value.lookup.return_value = None

            assert app_menu.get_settings() is None

        gio.SettingsSchemaSource.get_default.return_value.lookup.assert_called_once_with(app_menu.SCHEMA, True)
        gio.Settings.assert_not_called()

    def test_no_schema_source(self):
        with patch.object(app_menu, 'Gio') as gio:
            gio.SettingsSchemaSource.get_default.return_value = None

            assert app_menu.get_settings() is None

        gio.Settings.assert_not_called()

    def test_schema_installed(self):
        with patch.object(app_menu, 'Gio') as gio:
            settings = app_menu.get_settings()

        gio.Settings.assert_called_once_with(schema_id=app_menu.SCHEMA)
        assert settings is gio.Settings.return_value
