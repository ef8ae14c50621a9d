"""Constants for Jumplinks settings"""

# ==================== Schema ====================
SCHEMA_VERSION = 1
SCHEMA_VERSION_KEY = "_schemaVersion"

# ==================== File Paths ====================
CONFIG_FILE_DEFAULT = "config.toml"
LOG_FILE_DEFAULT = "data/jumplinks.log"
CONFIG_TABLE = "jumplinks"
ENV_PREFIX = "JUMPLINKS_"

# ==================== Host Integration ====================
MODULE_NAME = "ProcessJumplinks"
COMPANION_MODULE = "ProcessRedirects"
ASSETS_DIR = "Assets"
SCRIPT_ASSET = f"{MODULE_NAME}.min.js"
STYLE_ASSET = f"{MODULE_NAME}.css"
DONATE_BUTTON_ASSET = "DonateButton.png"

# Client-side config flags published to the admin page
JS_MODULE_ADMIN = "pjModuleAdmin"
JS_OLD_REDIRECTS_INSTALLED = "pjOldRedirectsInstalled"

# ==================== Links ====================
DOCS_HREF = "https://github.com/rockettpw/jumplinks"
SUPPORT_HREF = "https://processwire.com/talk/topic/8697-jumplinks/"
DONATE_HREF = "https://www.paypal.com/cgi-bin/webscr?cmd=_s-xclick&hosted_button_id=L8F6FFYK6ENBQ"
OPEN_SOURCE_HREF = "http://opensource.com/resources/what-open-source"
FREE_SOFTWARE_HREF = "https://en.wikipedia.org/wiki/Free_software"

# (title, url) pairs shown under "Module Recommendations"
RECOMMENDED_MODULES = [
    ("All In One Minify (AIOM+)", "http://mods.pw/5q"),
    ("Page Path History (core)", "http://mods.pw/2J"),
    ("XML Sitemap", "http://mods.pw/1V"),
    ("Markup SEO", "http://mods.pw/8D"),
    ("ProFields: AutoLinks", "http://mods.pw/6d"),
    ("ProFields: ProCache", "http://mods.pw/58"),
]

# ==================== Template Names ====================
TEMPLATE_DOCS_SUPPORT = "docs_support.html"
TEMPLATE_MODULE_RECOMMENDATIONS = "module_recommendations.html"
TEMPLATE_SUPPORT_DEVELOPMENT = "support_development.html"

# ==================== Layout ====================
HALF_WIDTH = 50
STATUS_CODES_RESET_ANCHOR = "#resetLegacyStatusCodes"
