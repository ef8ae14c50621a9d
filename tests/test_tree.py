"""Settings tree composer unit tests"""

from unittest.mock import Mock

import pytest

from jumplinks.config import HostConfig
from jumplinks.enums import Collapsed, SkipLabel
from jumplinks.errors import UnknownFieldKindError
from jumplinks.fields import FieldDescriptorFactory, FieldGroup
from jumplinks.host import FieldKindRegistry, RenderContext, default_field_kinds
from jumplinks.tree import SettingsTreeComposer, create_composer


def identity(message: str) -> str:
    return message


@pytest.fixture
def composer():
    return SettingsTreeComposer(
        FieldDescriptorFactory(default_field_kinds()),
        is_module_installed=lambda name: False,
        translate=identity,
    )


@pytest.fixture
def root(composer):
    return composer.compose()


def test_root_children_order(root):
    labels_or_names = [child.label for child in root.children]

    assert labels_or_names == [
        "Wildcard Cleaning",
        "Legacy Domain",
        "404 Monitor",
        "Disable index.php matching",
        "Info & Support",
    ]
    assert [child.kind for child in root.children] == [
        "fieldset",
        "fieldset",
        "checkbox",
        "checkbox",
        "fieldset",
    ]
    assert root.children[2].name == "enable404Monitor"
    assert root.children[3].name == "disableIndexPhpMatching"


def test_root_is_wrapper(root):
    assert isinstance(root, FieldGroup)
    assert root.kind == "wrapper"


def test_wildcard_cleaning_group(root):
    fieldset = root.children[0]
    radios, enhanced = fieldset.children

    assert radios.kind == "radios"
    assert radios.aliases == ["wildcardCleaning"]
    assert list(radios.options) == ["fullClean", "semiClean", "noClean"]
    assert radios.options["fullClean"] == "Full Clean (default, recommended)"
    assert radios.column_width == 50
    assert radios.skip_label == SkipLabel.HEADER
    assert "https://github.com/rockettpw/jumplinks/Configuration#wildcard-cleaning" in radios.notes

    assert enhanced.kind == "checkbox"
    assert enhanced.aliases == ["enhancedWildcardCleaning"]
    assert enhanced.label == "Enhanced Wildcard Cleaning"
    assert enhanced.label2 == "Use Enhanced Wildcard Cleaning"
    assert enhanced.column_width == 50
    assert enhanced.autocheck is True
    assert "only works when Wildcard Cleaning is enabled" in enhanced.notes


def test_legacy_domain_group(root):
    fieldset = root.children[1]
    domain, status_codes = fieldset.children

    assert "Configuration#legacy-domain" in fieldset.description
    assert domain.aliases == ["legacyDomain"]
    assert domain.kind == "text"
    assert domain.column_width == 50
    assert domain.spellcheck == "false"
    assert "http://legacy.domain.com/" in domain.placeholder

    assert status_codes.aliases == ["statusCodes"]
    assert status_codes.column_width == 50
    assert "#resetLegacyStatusCodes" in status_codes.notes


def test_collapse_states(root):
    wildcard, legacy, monitor, index_php, info = root.children

    assert wildcard.collapsed == Collapsed.NEVER
    assert legacy.collapsed == Collapsed.YES
    assert monitor.collapsed == Collapsed.BLANK
    assert index_php.collapsed == Collapsed.BLANK
    assert info.collapsed == Collapsed.NO
    assert info.get("moduleDebug").collapsed == Collapsed.BLANK


def test_info_support_group(root):
    info = root.children[4]
    debug, *markup = info.children

    assert debug.aliases == ["moduleDebug"]
    assert debug.label == "Debug Mode"
    assert [m.kind for m in markup] == ["markup", "markup", "markup"]
    assert [m.id for m in markup] == ["docsSupport", "moduleRecommendations", "supportDevelopment"]
    assert [m.collapsed for m in markup] == [Collapsed.YES, Collapsed.YES, Collapsed.NO]
    assert all(m.name is None for m in markup)


def test_markup_is_rendered_from_templates(root):
    info = root.children[4]
    docs = info.get("docsSupport")
    recommendations = info.get("moduleRecommendations")
    support = info.get("supportDevelopment")

    assert 'href="https://github.com/rockettpw/jumplinks"' in docs.value
    assert 'href="https://processwire.com/talk/topic/8697-jumplinks/"' in docs.value
    assert recommendations.value.count("<a ") == 6
    assert "XML Sitemap" in recommendations.value
    assert "/site/modules/ProcessJumplinks/Assets/DonateButton.png" in support.value


def test_markup_escapes_translated_text():
    composer = SettingsTreeComposer(
        FieldDescriptorFactory(default_field_kinds()),
        is_module_installed=lambda name: False,
        translate=lambda message: "<b>x</b>" if message == "Read the Documentation" else message,
    )

    docs = composer.compose().get("docsSupport")

    assert "&lt;b&gt;x&lt;/b&gt;" in docs.value


def test_unpersisted_setting_has_no_field(root):
    assert root.get("redirectsImported") is None


def test_compose_is_deterministic(composer):
    first = composer.compose()
    second = composer.compose()

    assert first == second
    assert first.model_dump() == second.model_dump()
    assert first is not second


def test_compose_does_not_query_capabilities():
    is_installed = Mock(return_value=True)
    composer = SettingsTreeComposer(
        FieldDescriptorFactory(default_field_kinds()), is_installed, translate=identity
    )

    composer.compose()

    is_installed.assert_not_called()


def test_get_input_fields_publishes_assets_and_flags():
    is_installed = Mock(return_value=True)
    composer = SettingsTreeComposer(
        FieldDescriptorFactory(default_field_kinds()),
        is_installed,
        module_url="/site/modules/ProcessJumplinks/",
        translate=identity,
    )
    context = RenderContext()

    root = composer.get_input_fields(context)

    is_installed.assert_called_once_with("ProcessRedirects")
    assert context.scripts == ["/site/modules/ProcessJumplinks/Assets/ProcessJumplinks.min.js"]
    assert context.styles == ["/site/modules/ProcessJumplinks/Assets/ProcessJumplinks.css"]
    assert context.js_config == {"pjModuleAdmin": True, "pjOldRedirectsInstalled": True}
    assert len(root.children) == 5


def test_companion_module_does_not_change_tree():
    trees = []
    for installed in (True, False):
        composer = SettingsTreeComposer(
            FieldDescriptorFactory(default_field_kinds()),
            lambda name, installed=installed: installed,
            translate=identity,
        )
        context = RenderContext()
        trees.append(composer.get_input_fields(context))
        assert context.js_config["pjOldRedirectsInstalled"] is installed

    assert trees[0] == trees[1]


def test_get_input_fields_twice_does_not_duplicate_assets(composer):
    context = RenderContext()

    composer.get_input_fields(context)
    composer.get_input_fields(context)

    assert len(context.scripts) == 1
    assert len(context.styles) == 1


def test_compose_fails_when_host_lacks_a_kind():
    registry = default_field_kinds()
    partial = FieldKindRegistry({k: registry.resolve(k) for k in registry.kinds if k != "markup"})
    composer = SettingsTreeComposer(
        FieldDescriptorFactory(partial), lambda name: False, translate=identity
    )

    with pytest.raises(UnknownFieldKindError):
        composer.compose()


def test_create_composer_uses_host_config():
    composer = create_composer(
        HostConfig(module_url="/modules/jl", installed_modules=["ProcessRedirects"]),
        translate=identity,
    )
    context = RenderContext()

    composer.get_input_fields(context)

    assert context.scripts == ["/modules/jl/Assets/ProcessJumplinks.min.js"]
    assert context.js_config["pjOldRedirectsInstalled"] is True
