"""Option enumerations for templates and fields.

Every enumeration carries a ``DEFAULT`` member meaning "inherit from the
fallback template". ``DEFAULT`` is never a resolved value.
"""

from enum import Enum


class ChoiceStyle(str, Enum):
    """How choices generated by ``{||}`` are laid out."""

    DEFAULT = "default"
    AUTO = "auto"  # inline or per line depending on the number of choices
    INLINE = "inline"
    PER_LINE = "per_line"


class CaseNormalization(str, Enum):
    """How to normalize the case of words."""

    DEFAULT = "default"
    INITIAL_UPPER = "initial_upper"
    LOWER = "lower"
    UPPER = "upper"
    NONE = "none"


class BoolDefault(str, Enum):
    """Three state boolean."""

    DEFAULT = "default"
    YES = "yes"
    NO = "no"


class FeedbackPolicy(str, Enum):
    """When the user gets feedback after an entry."""

    DEFAULT = "default"
    AUTO = "auto"  # only when part of the input was not understood
    ALWAYS = "always"
    NEVER = "never"


class TemplateUsage(str, Enum):
    """Conversational purpose served by a template."""

    PROMPT = "prompt"
    CLARIFY = "clarify"
    CURRENT_CHOICE = "current_choice"
    DATE_TIME = "date_time"
    DOUBLE = "double"
    FEEDBACK = "feedback"
    HELP = "help"
    HELP_CLARIFY = "help_clarify"
    HELP_DATE_TIME = "help_date_time"
    HELP_DOUBLE = "help_double"
    HELP_INTEGER = "help_integer"
    HELP_NAVIGATION = "help_navigation"
    HELP_ONE_NUMBER = "help_one_number"
    HELP_MANY_NUMBER = "help_many_number"
    HELP_ONE_WORD = "help_one_word"
    HELP_MANY_WORD = "help_many_word"
    HELP_STRING = "help_string"
    INTEGER = "integer"
    NAVIGATION = "navigation"
    NO_PREFERENCE = "no_preference"
    NOT_UNDERSTOOD = "not_understood"
    SELECT_ONE = "select_one"
    SELECT_MANY = "select_many"
    STRING = "string"
    UNSPECIFIED = "unspecified"
