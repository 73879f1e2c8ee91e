import threading

import pytest

from gentle.config import settings
from gentle.design import ColorPair, ColorRole, ColorScheme, DesignSpec, Theme, decode_color
from gentle.services import current_runtime, current_theme, install_theme


def _branded(hex_value: str) -> DesignSpec:
    base = DesignSpec.default()
    return base.with_colors(base.colors.with_pairs({ColorRole.PRIMARY_CTA: ColorPair(hex_value, hex_value)}))


def test_default_outside_any_installation():
    assert current_theme() == Theme.default()


def test_install_and_restore():
    outer = Theme(_branded("#111111"))
    inner = Theme(_branded("#222222"))
    with install_theme(outer) as active:
        assert active is outer
        assert current_theme() is outer
        with install_theme(inner):
            assert current_theme() is inner
        assert current_theme() is outer
    assert current_theme() == Theme.default()


def test_restored_after_exception():
    with pytest.raises(RuntimeError):
        with install_theme(Theme(_branded("#333333"))):
            raise RuntimeError("boom")
    assert current_theme() == Theme.default()


def test_spec_is_wrapped_in_theme():
    spec = _branded("#444444")
    with install_theme(spec) as active:
        assert isinstance(active, Theme)
        assert current_theme().spec is spec


def test_rejects_other_values():
    with pytest.raises(TypeError):
        with install_theme({"colors": {}}):  # type: ignore[arg-type]
            pass


def test_other_threads_see_default():
    seen = []
    with install_theme(Theme(_branded("#555555"))):
        worker = threading.Thread(target=lambda: seen.append(current_theme()))
        worker.start()
        worker.join()
    assert seen == [Theme.default()]


def test_runtime_reads_ambient_theme(monkeypatch):
    with install_theme(_branded("#666666")):
        assert current_runtime(ColorScheme.DARK).color(ColorRole.PRIMARY_CTA) == decode_color("#666666")
    monkeypatch.setattr(settings, "DEFAULT_SCHEME", "dark")
    assert current_runtime().scheme is ColorScheme.DARK
    assert current_runtime("sepia").scheme is ColorScheme.LIGHT
