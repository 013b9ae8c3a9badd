import json

from controllers.preference_store import OverlayPreferenceStore, PreferenceFile, default_home
from models.preference_model import EditorPreferences, preference_defaults


def test_file_round_trip(tmp_path):
    prefs = PreferenceFile("prefs.json", home=tmp_path, defaults={"width": "4"})
    assert prefs.load() == {}
    assert prefs.get_string("width") == "4"

    prefs.set_value("width", "8")
    prefs.set_value("smart", True)
    assert prefs.save()

    again = PreferenceFile("prefs.json", home=tmp_path)
    again.load()
    assert again.get_string("width") == "8"
    assert again.get_boolean("smart") is True


def test_corrupt_file_loads_empty(tmp_path):
    (tmp_path / "prefs.json").write_text("{not json", encoding="utf-8")
    prefs = PreferenceFile("prefs.json", home=tmp_path)
    assert prefs.load() == {}


def test_without_home_nothing_is_written(tmp_path):
    prefs = PreferenceFile("prefs.json", home=tmp_path)
    prefs.home = None
    prefs.set_value("a", 1)
    assert prefs.save() is False
    assert prefs.get("a") == 1


def test_default_home_honours_env(tmp_path, monkeypatch):
    target = tmp_path / "prefs-home"
    monkeypatch.setenv("PREFERENCE_PANEL_HOME", str(target))
    assert default_home() == target
    assert target.is_dir()


def test_overlay_stages_until_propagate(tmp_path):
    parent = PreferenceFile("prefs.json", home=tmp_path, defaults={"flag": False, "width": "4"})
    store = OverlayPreferenceStore(parent)

    store.set_value("flag", True)
    store.set_value("width", "8")
    assert store.get_boolean("flag") is True
    assert parent.get_boolean("flag") is False
    assert store.needs_saving()

    store.propagate()
    assert parent.get_string("width") == "8"
    assert store.staged() == {}
    assert not store.needs_saving()

    parent.save()
    saved = json.loads((tmp_path / "prefs.json").read_text(encoding="utf-8"))
    assert saved == {"flag": True, "width": "8"}


def test_overlay_discard_and_defaults(tmp_path):
    parent = PreferenceFile("prefs.json", home=tmp_path, defaults={"width": "4"})
    parent.set_value("width", "10")
    store = OverlayPreferenceStore(parent)

    store.set_value("width", "12")
    store.discard()
    assert store.get_string("width") == "10"

    store.load_defaults(["width"])
    assert store.get_string("width") == "4"


def test_string_and_boolean_conversions(tmp_path):
    parent = PreferenceFile("prefs.json", home=tmp_path)
    store = OverlayPreferenceStore(parent)
    store.set_value("b", "TRUE")
    store.set_value("n", 0)
    store.set_value("t", True)
    assert store.get_boolean("b") is True
    assert store.get_string("n") == "0"
    assert store.get_string("t") == "true"
    assert store.get_string("missing") == ""
    assert store.get_boolean("missing") is False


def test_editor_defaults_are_keyed_by_alias():
    defaults = preference_defaults()
    key = EditorPreferences.model_fields["tab_width"].alias
    assert defaults[key] == "4"
    assert defaults["templates.insert_header"] is False
