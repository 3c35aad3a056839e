from delfick_project.logging import lc
import re

# Make vim be quiet
lc = lc

regexes = {
    # \x1c to \x1f are not whitespace here even though str.split thinks they are
    "whitespace": re.compile(
        "[\t\n\v\f\r \x85\xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000]+"
    ),
}


def simplified(text):
    """
    Return text with leading and trailing whitespace removed and every
    internal run of whitespace replaced by a single space
    """
    return regexes["whitespace"].sub(" ", text).strip(" ")
