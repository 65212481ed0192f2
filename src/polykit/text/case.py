"""Case-style conversions between camelCase, hyphenated and delimited words."""

import re

# Word boundaries for decamelize: before each uppercase letter and at the start
# of each digit run, never at the very start of the string.
_CAMEL_BOUNDARY = re.compile(r"(?!^)(?:(?=[A-Z])|(?<!\d)(?=\d))")
_WORD_START = re.compile(r"(?:^|(?<=[ \t\r\n\f\v]))(.)")


def _ucfirst(word: str) -> str:
    return word[:1].upper() + word[1:]


def _lcfirst(word: str) -> str:
    return word[:1].lower() + word[1:]


def dehyphenate(name: str, ucfirst: bool = False, delimiter: str = "-") -> str:
    """Convert a hyphenated compound word into camel case.

    Ex: ``my-long-name`` => ``myLongName``; with ``delimiter="_"``,
    ``my_long_name`` => ``myLongName``.

    Args:
        name: The compound word.
        ucfirst: When True the first letter is capitalized, otherwise it is
            lower cased.
        delimiter: The character considered to be the "hyphen".

    Returns:
        str: The camel-cased word.
    """
    joined = "".join(_ucfirst(word) for word in name.split(delimiter))
    return joined if ucfirst else _lcfirst(joined)


def camelize(name: str, ucfirst: bool = False) -> str:
    """Convert whitespace-separated words into camel case.

    The first letter of every word is capitalized and spaces are removed;
    the remaining letters are left as they are.

    Ex: ``"my name"`` => ``"myName"`` (``"MyName"`` with ``ucfirst=True``).
    """
    joined = _WORD_START.sub(lambda m: m.group(1).upper(), name).replace(" ", "")
    return joined if ucfirst else _lcfirst(joined)


def decamelize(name: str, ucwords: bool = False, delimiter: str = " ") -> str:
    """Convert a camel-cased name into a delimited list of words.

    Words start at each uppercase letter and at each run of digits.

    Ex: ``"myHTTPServer2Go"`` => ``"my h t t p server 2 go"``.

    Args:
        name: The camel-cased name.
        ucwords: When True each word is capitalized, otherwise its first
            letter is lower cased.
        delimiter: Joins the words. Defaults to a space.

    Returns:
        str: The delimited words.
    """
    words = _CAMEL_BOUNDARY.split(name)
    convert = _ucfirst if ucwords else _lcfirst
    return delimiter.join(convert(word) for word in words)


def lcwords(text: str, delimiter: str = " ") -> str:
    """Lower case the first character of each word in `text`."""
    return delimiter.join(_lcfirst(word) for word in text.split(delimiter))
