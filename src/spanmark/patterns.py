"""Precompiled patterns for markup and format-string placeholders.

All patterns are compiled once at import time and never mutated, so they
are safe to share across highlighters and threads.

Usage:
    from spanmark.patterns import FORMAT_PATTERNS, MARKUP_RE

    if MARKUP_RE.search(text):
        ...
    pattern = FORMAT_PATTERNS.get("python")

"""

import re
from types import MappingProxyType

# HTML/XML tags (opening, closing, self-closing, with attributes) and
# named or numeric entity references. An entity body never spans another "&",
# so runs of ampersands are scanned in linear time.
MARKUP_RE: re.Pattern[str] = re.compile(
    r"(<\/?[a-zA-Z0-9:-]+(\s+[-:\w]+(=([-:\w+]+|\"[^\"]*\"|'[^']*'))?)*\s*\/?>)"
    r"|(&[^ ;&]+;)"
)

# php-format per https://www.php.net/manual/en/function.sprintf.php plus positionals
PHP_FORMAT_RE: re.Pattern[str] = re.compile(
    r"%(\d+\$)?[-+]{0,2}([ 0]|'.)?-?\d*(\..?\d+)?[%bcdeEfFgGosuxX]"
)

# c-format per https://en.cppreference.com/w/c/io/fprintf and POSIX positionals
C_FORMAT_RE: re.Pattern[str] = re.compile(
    r"%(\d+\$)?[-+ #0]{0,5}(\d+|\*)?(\.(\d+|\*))?(hh|ll|[hljztL])?[%csdioxXufFeEaAgGnp]"
)

# python-format: old style https://docs.python.org/3/library/stdtypes.html#old-string-formatting
#                new style https://docs.python.org/3/library/string.html#format-string-syntax
PYTHON_FORMAT_RE: re.Pattern[str] = re.compile(
    r"(%(\(\w+\))?[-+ #0]?(\d+|\*)?(\.(\d+|\*))?[hlL]?[diouxXeEfFgGcrs%])"  # old style
    r"|"
    r"(\{([^{}])*\})"  # new style, permissive
)

# ruby-format per https://ruby-doc.org/core/Kernel.html#method-i-sprintf (printf grammar;
# re.compile hands back the cached C pattern object)
RUBY_FORMAT_RE: re.Pattern[str] = re.compile(C_FORMAT_RE.pattern)

# Variable expansion used by common template languages. Alternatives, in order:
#   %var%            Twig
#   %{var}, {var}    Ruby and generic
#   {{var}}          Mustache-style
#   @var, %var       Drupal, no terminator (must stay after the terminated forms)
#   ":var", ':var'   Drupal, inside href attributes
COMMON_PLACEHOLDERS_RE: re.Pattern[str] = re.compile(
    r"%[\w.-]+%"
    r"|%?\{[\w.-]+\}"
    r"|\{\{[\w.-]+\}\}"
    r"|[@%][\w-]+"
    r"|\":[\w-]+\""
    r"|':[\w-]+'"
)

# Format flag (as declared on a catalog item) -> placeholder pattern
FORMAT_PATTERNS: MappingProxyType[str, re.Pattern[str]] = MappingProxyType(
    {
        "php": PHP_FORMAT_RE,
        "c": C_FORMAT_RE,
        "python": PYTHON_FORMAT_RE,
        "ruby": RUBY_FORMAT_RE,
    }
)


__all__ = [
    "COMMON_PLACEHOLDERS_RE",
    "C_FORMAT_RE",
    "FORMAT_PATTERNS",
    "MARKUP_RE",
    "PHP_FORMAT_RE",
    "PYTHON_FORMAT_RE",
    "RUBY_FORMAT_RE",
]
