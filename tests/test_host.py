"""Host capability unit tests"""

import pytest

from jumplinks.enums import FieldKind
from jumplinks.errors import UnknownFieldKindError
from jumplinks.fields import FieldDescriptor, FieldGroup
from jumplinks.host import FieldKindRegistry, InstalledModules, RenderContext, default_field_kinds


def test_default_field_kinds():
    registry = default_field_kinds()

    assert registry.kinds == ["checkbox", "fieldset", "markup", "radios", "text", "wrapper"]
    assert registry.resolve("fieldset") is FieldGroup
    assert registry.resolve("wrapper") is FieldGroup
    assert registry.resolve("checkbox") is FieldDescriptor
    assert FieldKind.MARKUP in registry
    assert "markup" in registry


def test_resolve_unknown_kind():
    with pytest.raises(UnknownFieldKindError, match="Unknown field kind: select"):
        FieldKindRegistry().resolve("select")


def test_register_overrides_kind():
    class Fancy(FieldDescriptor):
        pass

    registry = default_field_kinds()
    registry.register(FieldKind.TEXT, Fancy)

    assert registry.resolve("text") is Fancy


def test_installed_modules():
    is_installed = InstalledModules(["ProcessRedirects", "MarkupSEO"])

    assert is_installed("ProcessRedirects") is True
    assert is_installed("ProcessJumplinks") is False
    assert InstalledModules()("ProcessRedirects") is False


def test_render_context_defaults():
    context = RenderContext()

    assert context.scripts == []
    assert context.styles == []
    assert context.js_config == {}


def test_render_context_collects_assets_and_flags():
    context = RenderContext()
    context.add_script("/a.js")
    context.add_script("/a.js")
    context.add_style("/a.css")
    context.js("flag", True)
    context.js("flag", False)

    assert context.scripts == ["/a.js"]
    assert context.styles == ["/a.css"]
    assert context.js_config == {"flag": False}
