# Copyright Jay Conrod. All rights reserved.
#
# This file is part of Bairiak. Use of this source code is governed by
# the GPL license that can be found in the LICENSE.txt file.


from io import StringIO
import sys

from bairiak.errors import BairiakException, ParseBairiakEnumsException, WriteFileException
from bairiak.spec import loadSpec
from bairiak.validation import validateEnum
from bairiak.widths import selectWidth


IMPORTS_CODE = "from bairiak import Bairiak, BairiakEnum\n"

_IMPORTED_NAMES = ("Bairiak", "BairiakEnum")


def _isEnumMemberName(name, className):
    # Enum skips _sunder_ and __dunder__ names, and the compiler mangles __private ones.
    if name.startswith("__") or name.startswith("_%s__" % className.lstrip("_")):
        return False
    if (len(name) > 2 and name[0] == "_" and name[-1] == "_" and
            name[1] != "_" and name[-2] != "_"):
        return False
    return True


def _checkNames(defn):
    if defn.name in _IMPORTED_NAMES:
        raise ParseBairiakEnumsException.fromDefn(
            defn, "Enum name %r is reserved by the generated imports." % defn.name)
    for variant in defn.variants:
        if not _isEnumMemberName(variant, defn.name):
            raise ParseBairiakEnumsException.fromDefn(
                defn, "Invalid enum variant %r. Enum variant would not be a member." % variant)


def generateEnum(defn):
    """Returns the source of a flag type for one enum definition.

    The flag type is a BairiakEnum subclass with one member per variant, numbered in order,
    and an implementation of the BairiakEnum methods for the narrowest width that holds all
    the variants.
    """
    validateEnum(defn)
    _checkNames(defn)
    width = selectWidth(len(defn.variants), defn.name)

    out = StringIO()
    out.write("\n\nclass %s(BairiakEnum):\n" % defn.name)
    for position, variant in enumerate(defn.variants):
        out.write("    %s = %d\n" % (variant, position))
    out.write("""
    @classmethod
    def getZeroBairiak(cls):
        return Bairiak.%s(0)

    def toPosition(self):
        return int(self)
""" % width.factoryName)
    return out.getvalue()


def generateEnums(spec):
    out = StringIO()
    for defn in spec.enums:
        out.write(generateEnum(defn))
    return out.getvalue()


def generateModule(spec):
    return IMPORTS_CODE + generateEnums(spec)


def writeFile(fileName, text):
    try:
        with open(fileName, "w", encoding="utf-8") as outFile:
            outFile.write(text)
    except OSError as e:
        raise WriteFileException(fileName, "could not write file: %s" % e)


def generateBairiakEnums(specPath, outputPath, errStream=None):
    """Reads a flag spec and writes a Python module defining its flag types.

    Either the whole module is written or nothing is: the output file is only opened after
    every enum has been generated.

    Args:
        specPath (str): name of the YAML spec file.
        outputPath (str): name of the module to write.
        errStream: where diagnostics are written. Defaults to sys.stderr.

    Raises:
        BairiakException: one of ReadSpecException, DeserializeYamlException,
            ParseBairiakEnumsException, PositionOutOfRangeException, or WriteFileException.
            The exception is written to `errStream` before it is raised.
    """
    if errStream is None:
        errStream = sys.stderr
    try:
        spec = loadSpec(specPath)
        code = generateModule(spec)
        writeFile(outputPath, code)
    except BairiakException as e:
        errStream.write("%s\n" % e)
        raise


__all__ = ["IMPORTS_CODE", "generateEnum", "generateEnums", "generateModule",
           "generateBairiakEnums"]
