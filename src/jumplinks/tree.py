"""Composition of the module configuration page."""

import logging
from pathlib import Path
from typing import Callable, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .config import HostConfig
from .consts import (
    ASSETS_DIR,
    COMPANION_MODULE,
    DOCS_HREF,
    DONATE_BUTTON_ASSET,
    DONATE_HREF,
    FREE_SOFTWARE_HREF,
    HALF_WIDTH,
    JS_MODULE_ADMIN,
    JS_OLD_REDIRECTS_INSTALLED,
    OPEN_SOURCE_HREF,
    RECOMMENDED_MODULES,
    SCRIPT_ASSET,
    STATUS_CODES_RESET_ANCHOR,
    STYLE_ASSET,
    SUPPORT_HREF,
    TEMPLATE_DOCS_SUPPORT,
    TEMPLATE_MODULE_RECOMMENDATIONS,
    TEMPLATE_SUPPORT_DEVELOPMENT,
)
from .enums import Collapsed, FieldKind, SkipLabel, WildcardCleaning
from .fields import FieldDescriptor, FieldDescriptorFactory, FieldGroup
from .host import InstalledModules, RenderContext, default_field_kinds
from .i18n import gettext
from .utils import join_url

logger = logging.getLogger(__name__)

DEFAULT_MODULE_URL = "/site/modules/ProcessJumplinks/"


class SettingsTreeComposer:
    """Builds the ordered field tree of the Jumplinks settings page.

    Every call builds a new tree. Nothing is cached between calls, so two
    compositions with the same inputs are deep-equal.
    """

    def __init__(
        self,
        factory: FieldDescriptorFactory,
        is_module_installed: Callable[[str], bool],
        module_url: str = DEFAULT_MODULE_URL,
        translate: Optional[Callable[[str], str]] = None,
    ):
        self.factory = factory
        self.is_module_installed = is_module_installed
        self.module_url = module_url
        self._ = translate or gettext
        template_dir = Path(__file__).parent / "templates"
        self.jinja_env = Environment(
            loader=FileSystemLoader(template_dir),
            autoescape=select_autoescape(),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    @property
    def assets_url(self) -> str:
        return join_url(self.module_url, ASSETS_DIR)

    def get_input_fields(self, context: RenderContext) -> FieldGroup:
        """Publish page assets and client flags to ``context``, then compose.

        The companion module lookup only feeds the client flag; it never
        changes the shape of the tree.
        """
        context.add_script(join_url(self.assets_url, SCRIPT_ASSET))
        context.add_style(join_url(self.assets_url, STYLE_ASSET))

        old_redirects_installed = bool(self.is_module_installed(COMPANION_MODULE))
        logger.debug(f"{COMPANION_MODULE} installed: {old_redirects_installed}")
        context.js(JS_MODULE_ADMIN, True)
        context.js(JS_OLD_REDIRECTS_INSTALLED, old_redirects_installed)

        return self.compose()

    def compose(self) -> FieldGroup:
        root = self.factory.build(FieldKind.WRAPPER)

        root.add(self._wildcard_cleaning())
        root.add(self._legacy_domain())
        root.add(self._monitor_404())
        root.add(self._index_php_matching())
        root.add(self._info_support())

        return root

    def _wildcard_cleaning(self) -> FieldGroup:
        _ = self._
        fieldset = self.factory.build(
            FieldKind.FIELDSET,
            {
                "label": _("Wildcard Cleaning"),
                "collapsed": Collapsed.NEVER,
            },
        )

        fieldset.add(
            self.factory.build(
                FieldKind.RADIOS,
                {
                    ("name", "id"): "wildcardCleaning",
                    "description": _(
                        "When set to 'Full Clean', each wildcard in a destination path will be "
                        "automatically cleaned, or 'slugged', so that it is lower-case, and uses "
                        "hyphens as word separators."
                    ),
                    "notes": _(
                        "**Note:** It's recommended that you keep this set to 'Full Clean', "
                        "unless you have a module installed that uses different path formats "
                        "(such as TitleCase with underscores or hyphens). "
                        "**[Learn more about Wildcard Cleaning]({docs}/Configuration#wildcard-cleaning)**"
                    ).format(docs=DOCS_HREF),
                    "options": {
                        WildcardCleaning.FULL_CLEAN.value: _("Full Clean (default, recommended)"),
                        WildcardCleaning.SEMI_CLEAN.value: _("Clean, but don't change case"),
                        WildcardCleaning.NO_CLEAN.value: _("Don't clean at all (not recommended)"),
                    },
                    "column_width": HALF_WIDTH,
                    "collapsed": Collapsed.NEVER,
                    "skip_label": SkipLabel.HEADER,
                },
            )
        )

        # Only takes effect when wildcardCleaning is fullClean or semiClean
        fieldset.add(
            self.factory.build(
                FieldKind.CHECKBOX,
                {
                    ("name", "id"): "enhancedWildcardCleaning",
                    "label": _("Enhanced Wildcard Cleaning"),
                    "description": _(
                        "When enabled, wildcard cleaning goes a step further by means of breaking "
                        "and hyphenating TitleCase wildcards, as well as those that contain "
                        "abbreviations (ex: NASALaunch). Examples below."
                    ),
                    "label2": _("Use Enhanced Wildcard Cleaning"),
                    "notes": _(
                        "**Examples:** 'EnvironmentStudy' would become 'environment-study' and "
                        "'NASALaunch' would become 'nasa-launch'.\n"
                        "**Note:** This feature only works when Wildcard Cleaning is enabled."
                    ),
                    "column_width": HALF_WIDTH,
                    "collapsed": Collapsed.NEVER,
                    "autocheck": True,
                },
            )
        )

        return fieldset

    def _legacy_domain(self) -> FieldGroup:
        _ = self._
        fieldset = self.factory.build(
            FieldKind.FIELDSET,
            {
                "label": _("Legacy Domain"),
                "description": _(
                    "Only use this if you are performing a slow migration to ProcessWire, and "
                    "would still like your visitors to access old content moved to a new "
                    "location, like a subdomain or folder, for example. "
                    "[Learn more about how this feature works]({docs}/Configuration#legacy-domain)."
                ).format(docs=DOCS_HREF),
                "collapsed": Collapsed.YES,
            },
        )

        fieldset.add(
            self.factory.build(
                FieldKind.TEXT,
                {
                    ("name", "id"): "legacyDomain",
                    "column_width": HALF_WIDTH,
                    "description": _(
                        "Attempt any requested, unresolved Source paths on a legacy domain/URL."
                    ),
                    "notes": _(
                        "Enter a *full*, valid domain/URL. "
                        "**Source Path won't be cleaned upon redirect**."
                    ),
                    "placeholder": _(
                        'Examples: "http://legacy.domain.com/" or "http://domain.com/old/"'
                    ),
                    "collapsed": Collapsed.NEVER,
                    "skip_label": SkipLabel.HEADER,
                    "spellcheck": "false",
                },
            )
        )

        # The "Use Default" anchor is handled client-side by the page script
        fieldset.add(
            self.factory.build(
                FieldKind.TEXT,
                {
                    ("name", "id"): "statusCodes",
                    "column_width": HALF_WIDTH,
                    "description": _(
                        "Only redirect if a request to it yields one of these HTTP status codes:"
                    ),
                    "notes": _(
                        "Separate each code with a space. **[Use Default]({anchor})**"
                    ).format(anchor=STATUS_CODES_RESET_ANCHOR),
                    "collapsed": Collapsed.NEVER,
                    "skip_label": SkipLabel.HEADER,
                    "spellcheck": "false",
                },
            )
        )

        return fieldset

    def _monitor_404(self) -> FieldDescriptor:
        _ = self._
        return self.factory.build(
            FieldKind.CHECKBOX,
            {
                ("name", "id"): "enable404Monitor",
                "label": _("404 Monitor"),
                "description": _(
                    "If you'd like to monitor and log 404 hits so that you can later create "
                    "jumplinks for them, check the box below."
                ),
                "label2": _("Log 404 hits to the database"),
                "notes": _(
                    "This log will be displayed on the Jumplinks setup page in a separate tab "
                    "(limited to the last 100).\n"
                    "**Note:** Turning this off will not delete any existing records from the "
                    "database."
                ),
                "collapsed": Collapsed.BLANK,
                "autocheck": True,
            },
        )

    def _index_php_matching(self) -> FieldDescriptor:
        _ = self._
        return self.factory.build(
            FieldKind.CHECKBOX,
            {
                ("name", "id"): "disableIndexPhpMatching",
                "label": _("Disable index.php matching"),
                "description": _(
                    "Jumplinks supports the matching and redirecting `/index.php/oldpage` "
                    "requests. When requests like these are made, Jumplinks automatically "
                    "redirects them to `/index.php.pwpj/oldpage` - this is part of the 'magic "
                    "sauce' that allows Jumplinks to handle these requests. However, the feature "
                    "isn't very helpful when you don't need it, as those automatic redirects "
                    "remain when jumplinks have not been defined for them.\n\n"
                    "If you don't need this feature, then you can safely disable it entirely by "
                    "checking the box below:"
                ),
                "label2": _("Don't match these requests"),
                "notes": _(
                    "Note that any registered jumplinks that start with `index.php/` will not "
                    "be matched."
                ),
                "collapsed": Collapsed.BLANK,
                "autocheck": True,
            },
        )

    def _info_support(self) -> FieldGroup:
        _ = self._
        fieldset = self.factory.build(
            FieldKind.FIELDSET,
            {
                "label": _("Info & Support"),
                "collapsed": Collapsed.NO,
                "skip_label": SkipLabel.HEADER,
            },
        )

        fieldset.add(
            self.factory.build(
                FieldKind.CHECKBOX,
                {
                    ("name", "id"): "moduleDebug",
                    "label": _("Debug Mode"),
                    "description": _(
                        "If you run into any problems with your jumplinks, you can turn on debug "
                        "mode. Once turned on, you'll be shown a scan log when a 404 Page Not "
                        "Found is hit. That will give you an indication of what may be going "
                        "wrong. If it doesn't, and you can't figure it out, then paste your log "
                        "into the support thread on the forums."
                    ),
                    "label2": _("Turn debug mode on"),
                    "notes": _(
                        "**Notes:** Hits won't be affected when debug mode is turned on. Also, "
                        "only those that have permission to manage jumplinks will be shown the "
                        "debug logs."
                    ),
                    "collapsed": Collapsed.BLANK,
                    "autocheck": True,
                },
            )
        )

        fieldset.add(
            self._markup(
                "docsSupport",
                _("Documentation & Support"),
                TEMPLATE_DOCS_SUPPORT,
                Collapsed.YES,
                paragraph=_(
                    "Be sure to read the documentation, as it contains all the information you "
                    "need to get started with Jumplinks. If you're having problems and unable to "
                    "determine the cause(s) thereof, feel free to ask for help in the official "
                    "support thread."
                ),
                docs_href=DOCS_HREF,
                docs_text=_("Read the Documentation"),
                support_href=SUPPORT_HREF,
                support_text=_("Official Support Thread"),
            )
        )

        fieldset.add(
            self._markup(
                "moduleRecommendations",
                _("Module Recommendations"),
                TEMPLATE_MODULE_RECOMMENDATIONS,
                Collapsed.YES,
                paragraph=_(
                    "Jumplinks complements your SEO-toolkit, which should comprise of the "
                    "following modules as well:"
                ),
                modules=RECOMMENDED_MODULES,
            )
        )

        fieldset.add(
            self._markup(
                "supportDevelopment",
                _("Support Jumplinks Development"),
                TEMPLATE_SUPPORT_DEVELOPMENT,
                Collapsed.NO,
                paragraph=_(
                    "Jumplinks is an open-source project, and is free to use. In fact, Jumplinks "
                    "will always be open-source, and will always remain free to use. Forever. If "
                    "you would like to support the development of Jumplinks, please make a small "
                    "donation via PayPal using the button to the right."
                ),
                donate_href=DONATE_HREF,
                donate_button_src=join_url(self.assets_url, DONATE_BUTTON_ASSET),
                learn_more=_("Learn more about"),
                open_source_href=OPEN_SOURCE_HREF,
                open_source=_("Open Source Software"),
                free_software_href=FREE_SOFTWARE_HREF,
                free_software=_("Free Software"),
            )
        )

        return fieldset

    def _markup(
        self, markup_id: str, label: str, template_name: str, collapsed: Collapsed, **context
    ) -> FieldDescriptor:
        template = self.jinja_env.get_template(template_name)
        return self.factory.build(
            FieldKind.MARKUP,
            {
                "id": markup_id,
                "label": label,
                "value": template.render(**context),
                "collapsed": collapsed,
            },
        )


def create_composer(
    host: HostConfig, translate: Optional[Callable[[str], str]] = None
) -> SettingsTreeComposer:
    """Wire a composer to the in-process host capabilities described by ``host``."""
    factory = FieldDescriptorFactory(default_field_kinds())
    return SettingsTreeComposer(
        factory,
        InstalledModules(host.installed_modules),
        module_url=host.module_url,
        translate=translate,
    )
