# Copyright Jay Conrod. All rights reserved.
#
# This file is part of Bairiak. Use of this source code is governed by
# the GPL license that can be found in the LICENSE.txt file.


import re

import yaml

from bairiak.data import Data
from bairiak.errors import DeserializeYamlException, ReadSpecException


class EnumSpec(Data):
    propertyNames = ["enums"]


class EnumDefn(Data):
    propertyNames = ["name", "variants"]


_BOOL_TAG = "tag:yaml.org,2002:bool"


class _SpecLoader(yaml.SafeLoader):
    """Safe loader that only reads true and false as booleans, as YAML 1.2 does.

    YAML 1.1 also reads yes, no, on, and off as booleans, which are reasonable flag names.
    """


_SpecLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _BOOL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()}
_SpecLoader.add_implicit_resolver(
    _BOOL_TAG, re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"), list("tTfF"))


def readSpec(fileName):
    try:
        with open(fileName, encoding="utf-8") as specFile:
            return specFile.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ReadSpecException(fileName, "could not read spec: %s" % e)


def parseSpec(text, fileName="<string>"):
    """Parses the text of a flag spec.

    The spec is a YAML document like this:

        enums:
          - name: Color
            variants: [Red, Green, Blue]

    Keys other than the ones above are ignored.

    Raises:
        DeserializeYamlException: if the text is not YAML or doesn't have the structure above.
    """
    try:
        doc = yaml.load(text, Loader=_SpecLoader)
    except yaml.YAMLError as e:
        raise DeserializeYamlException(fileName, "could not parse spec: %s" % e)

    def expect(cond, message):
        if not cond:
            raise DeserializeYamlException(fileName, message)

    expect(isinstance(doc, dict), "spec must be a mapping")
    expect("enums" in doc, "missing field `enums`")
    expect(isinstance(doc["enums"], list), "`enums` must be a list")
    enums = []
    for index, enumData in enumerate(doc["enums"]):
        expect(isinstance(enumData, dict), "enums[%d]: must be a mapping" % index)
        expect("name" in enumData, "enums[%d]: missing field `name`" % index)
        expect("variants" in enumData, "enums[%d]: missing field `variants`" % index)
        name = enumData["name"]
        variants = enumData["variants"]
        expect(isinstance(name, str), "enums[%d]: `name` must be a string" % index)
        expect(isinstance(variants, list), "enums[%d]: `variants` must be a list" % index)
        expect(all(isinstance(v, str) for v in variants),
               "enums[%d]: `variants` must contain only strings" % index)
        enums.append(EnumDefn(name, tuple(variants)))
    return EnumSpec(tuple(enums))


def loadSpec(fileName):
    return parseSpec(readSpec(fileName), fileName)


__all__ = ["EnumSpec", "EnumDefn", "readSpec", "parseSpec", "loadSpec"]
