import logging

from gentle.config import settings
from gentle.design import ColorPair, ColorRole, DesignSpec, Theme, save_spec
from gentle.services import ThemeService, current_theme, flatten_spec


def _branded(hex_value: str) -> DesignSpec:
    base = DesignSpec.default()
    return base.with_colors(base.colors.with_pairs({ColorRole.PRIMARY_CTA: ColorPair(hex_value, "#3B82F6")}))


def test_flatten_uses_serialized_paths():
    flat = flatten_spec(DesignSpec.default())
    assert flat["colors.pairByRole.primaryCTA.lightHex"] == "#4A6EF5"
    assert flat["layout.gap.m"] == 12
    assert flat["_specVersion"] == "0.2.1"


def test_set_spec_reports_diff_and_notifies():
    svc = ThemeService()
    events = []
    svc.subscribe(lambda theme, diff: events.append((theme, diff)))
    diff = svc.set_spec(_branded("#000000"))
    assert diff.keys() == ["colors.pairByRole.primaryCTA.lightHex"]
    assert diff.changed["colors.pairByRole.primaryCTA.lightHex"] == ("#4A6EF5", "#000000")
    assert len(events) == 1
    assert events[0][0] is svc.theme
    assert svc.spec.colors.pair(ColorRole.PRIMARY_CTA).light_hex == "#000000"


def test_equal_spec_is_noop():
    svc = ThemeService()
    events = []
    svc.subscribe(lambda theme, diff: events.append(diff))
    diff = svc.set_spec(DesignSpec.default())
    assert diff.no_changes
    assert events == []


def test_removed_role_appears_with_none():
    svc = ThemeService()
    base = DesignSpec.default()
    diff = svc.set_spec(base.with_colors(base.colors.without(ColorRole.DESTRUCTIVE)))
    assert diff.changed["colors.pairByRole.destructive.darkHex"] == ("#F87171", None)


def test_unsubscribe():
    svc = ThemeService()
    events = []
    unsubscribe = svc.subscribe(lambda theme, diff: events.append(diff))
    unsubscribe()
    unsubscribe()
    svc.set_spec(_branded("#000000"))
    assert events == []


def test_failing_listener_does_not_block_others(caplog):
    svc = ThemeService()
    events = []

    def broken(theme, diff):
        raise RuntimeError("listener bug")

    svc.subscribe(broken)
    svc.subscribe(lambda theme, diff: events.append(diff))
    with caplog.at_level(logging.ERROR, logger="gentle.services.theme_service"):
        svc.set_spec(_branded("#000000"))
    assert len(events) == 1
    assert any("failed" in r.getMessage() for r in caplog.records)


def test_reset_to_default():
    svc = ThemeService(Theme(_branded("#000000")))
    diff = svc.reset_to_default()
    assert not diff.no_changes
    assert svc.theme == Theme.default()


def test_load_or_default_installs_stored_spec(tmp_path):
    path = save_spec(_branded("#ABCDEF"), tmp_path / "spec.json")
    svc = ThemeService()
    assert svc.load_or_default(path) is True
    assert svc.spec.colors.pair(ColorRole.PRIMARY_CTA).light_hex == "#ABCDEF"


def test_load_or_default_falls_back_on_missing_file(tmp_path, caplog):
    svc = ThemeService(Theme(_branded("#000000")))
    with caplog.at_level(logging.WARNING, logger="gentle.services.theme_service"):
        assert svc.load_or_default(tmp_path / "missing.json") is False
    assert svc.theme == Theme.default()
    assert any("Falling back" in r.getMessage() for r in caplog.records)


def test_load_or_default_falls_back_on_malformed_file(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text('{"_specVersion": "0.2.1", "colors": []}', encoding="utf-8")
    svc = ThemeService()
    assert svc.load_or_default(path) is False
    assert svc.theme == Theme.default()


def test_create_default_reads_settings(tmp_path, monkeypatch):
    path = save_spec(_branded("#123456"), tmp_path / "spec.json")
    monkeypatch.setattr(settings, "SPEC_PATH", str(path))
    svc = ThemeService.create_default()
    assert svc.spec.colors.pair(ColorRole.PRIMARY_CTA).light_hex == "#123456"
    monkeypatch.setattr(settings, "SPEC_PATH", None)
    assert ThemeService.create_default().theme == Theme.default()


def test_activate_installs_ambient_theme():
    svc = ThemeService(Theme(_branded("#000000")))
    with svc.activate() as theme:
        assert current_theme() is theme is svc.theme
    assert current_theme() == Theme.default()


def test_set_spec_keeps_scaler():
    def double(point_size, anchor, category):
        return point_size * 2

    svc = ThemeService(Theme(scaler=double))
    svc.set_spec(_branded("#000000"))
    assert svc.theme.scaler is double


def test_load_or_default_falls_back_on_undecodable_bytes(tmp_path):
    svc = ThemeService(Theme(_branded("#000000")))
    for name, payload in (("bom.json", b"\xff\xfe{}"), ("latin1.json", b"\xff{}")):
        path = tmp_path / name
        path.write_bytes(payload)
        assert svc.load_or_default(path) is False
        assert svc.theme == Theme.default()


def test_create_default_survives_undecodable_file(tmp_path, monkeypatch):
    path = tmp_path / "spec.json"
    path.write_bytes(b"\xff\xfe{}")
    monkeypatch.setattr(settings, "SPEC_PATH", str(path))
    assert ThemeService.create_default().theme == Theme.default()


def test_set_theme_installs_new_scaler_with_same_tokens():
    def fixed(point_size, anchor, category):
        return 99.0

    svc = ThemeService()
    events = []
    svc.subscribe(lambda theme, diff: events.append(diff))
    diff = svc.set_theme(Theme(DesignSpec.default(), scaler=fixed))
    assert svc.theme.scaler is fixed
    assert diff.no_changes
    assert len(events) == 1
    assert svc.theme.text_style("body_m").font.point_size == 99.0
