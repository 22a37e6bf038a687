# Copyright Jay Conrod. All rights reserved.
#
# This file is part of Bairiak. Use of this source code is governed by
# the GPL license that can be found in the LICENSE.txt file.


import re

from bairiak.errors import ParseBairiakEnumsException


# This is a style check, not a grammar. It only rejects names that start with a lowercase
# letter or a digit.
_CAMEL_CASE_RE = re.compile(r"[^a-z0-9]\w*")


def isCamelCase(name):
    return _CAMEL_CASE_RE.fullmatch(name) is not None


def validateEnum(defn):
    """Checks that an enum definition can be turned into a flag type.

    Raises:
        ParseBairiakEnumsException: if the enum name or one of its variant names is not in
            CamelCase, or if there are no variants. The first problem found is reported.
    """
    if not isCamelCase(defn.name):
        raise ParseBairiakEnumsException.fromDefn(
            defn, "Invalid enum name. Enum name should be in CamelCase.")
    if len(defn.variants) == 0:
        raise ParseBairiakEnumsException.fromDefn(defn, "Enum variants cannot be empty.")
    for variant in defn.variants:
        if not isCamelCase(variant):
            raise ParseBairiakEnumsException.fromDefn(
                defn,
                "Invalid enum variant %r. Enum variant should be in CamelCase." % variant)


__all__ = ["isCamelCase", "validateEnum"]
