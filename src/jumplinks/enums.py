"""Enumeration type definitions"""

from enum import Enum


class Collapsed(str, Enum):
    """Initial visibility of a field or fieldset"""

    NEVER = "never"
    YES = "yes"
    NO = "no"
    BLANK = "blank"


class SkipLabel(str, Enum):
    NO = "no"
    HEADER = "header"


class WildcardCleaning(str, Enum):
    FULL_CLEAN = "fullClean"
    SEMI_CLEAN = "semiClean"
    NO_CLEAN = "noClean"


class FieldKind(str, Enum):
    WRAPPER = "wrapper"
    FIELDSET = "fieldset"
    RADIOS = "radios"
    CHECKBOX = "checkbox"
    TEXT = "text"
    MARKUP = "markup"
