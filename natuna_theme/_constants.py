"""Common literal values used across natuna_theme.

Option names mirror the keys users write in their options file, so the
plugin, the config loader, and tests import the same spellings instead of
repeating string literals.

Examples
--------
>>> from natuna_theme import _constants
>>> _constants.STATIC_MARKDOWN_DOCS
'staticMarkdownDocs'
>>> _constants.INDEX_PAGE
'index.html'
"""

THEME_NAME = "natuna"

README = "readme"
OUT = "out"
THEME = "theme"
NAME = "name"
STATIC_MARKDOWN_DOCS = "staticMarkdownDocs"
CUSTOM_NAVIGATIONS = "customNavigations"
REMOVE_PRIMARY_NAVIGATION = "removePrimaryNavigation"
REMOVE_SECONDARY_NAVIGATION = "removeSecondaryNavigation"
MARKDOWN_FILES_CONTENT_REPLACEMENT = "markdownFilesContentReplacement"
MARKDOWN_FILES_CONTENT_REPLACEMENT_MAX_PASSES = (
    "markdownFilesContentReplacementMaxPasses"
)

README_NONE_SUFFIX = "none"
INDEX_PAGE = "index.html"
MODULES_PAGE = "modules.html"
PAGE_SUFFIX = ".html"

BODY_BEGIN_HOOK = "body.begin"
