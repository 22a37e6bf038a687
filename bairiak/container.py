# Copyright Jay Conrod. All rights reserved.
#
# This file is part of Bairiak. Use of this source code is governed by
# the GPL license that can be found in the LICENSE.txt file.


import enum

from bairiak.data import Data
from bairiak import utils
from bairiak import widths


class Bairiak(Data):
    """A set of flags packed into a single unsigned integer.

    The width of the integer is fixed when the container is created: it is the narrowest width
    that can hold every position of the flag type the container is used with. Flags are added
    by OR-ing their bits into the value; the width never changes afterward.

    Positions come from `BairiakEnum.toPosition`. Generated flag types only produce positions
    that fit in their width. A hand-written flag type is responsible for the same; positions
    outside the width fail an assertion.
    """

    propertyNames = ["width", "value"]

    def __init__(self, width, value=0):
        assert utils.fitsInBits(value, width.bits)
        super(Bairiak, self).__init__(width, value)

    @classmethod
    def u8(cls, value=0):
        return cls(widths.U8, value)

    @classmethod
    def u16(cls, value=0):
        return cls(widths.U16, value)

    @classmethod
    def u32(cls, value=0):
        return cls(widths.U32, value)

    @classmethod
    def u64(cls, value=0):
        return cls(widths.U64, value)

    @classmethod
    def u128(cls, value=0):
        return cls(widths.U128, value)

    def isFalse(self, flag):
        position = self._getPosition(flag)
        return (self.value & (1 << position)) == 0

    def isTrue(self, flag):
        return not self.isFalse(flag)

    def setFlag(self, flag):
        position = self._getPosition(flag)
        self.value = utils.bitSet(self.value, position)

    def getFlagSet(self, flagType):
        """Returns the members of `flagType` whose bits are set in this container."""
        return frozenset(flag for flag in flagType
                         if utils.bit(self.value, self._getPosition(flag)) != 0)

    def _getPosition(self, flag):
        position = flag.toPosition()
        assert 0 <= position < self.width.bits
        return position


class BairiakEnum(enum.IntEnum):
    """Base class for flag types that can be stored in a Bairiak.

    A flag type is an integer enumeration with no gaps: its members are numbered from zero in
    declaration order, and each member's number is its bit position. Subclasses must define
    `getZeroBairiak`, which returns an empty container of the narrowest width that holds every
    member, and `toPosition`, which returns the member's bit position. Flag types are normally
    produced by `bairiak.generator`.
    """

    @classmethod
    def getZeroBairiak(cls):
        raise NotImplementedError()

    def toPosition(self):
        raise NotImplementedError()


def generateBairiak(flags, flagType=None):
    """Builds a container with the bits of the given flags set.

    Args:
        flags: an iterable of members of one BairiakEnum subclass. Order and duplicates don't
            matter.
        flagType: the BairiakEnum subclass the flags belong to. Only needed when `flags` may be
            empty, since the type is otherwise taken from the first flag.

    Returns:
        A new Bairiak of the flag type's width.
    """
    flags = list(flags)
    if flagType is None:
        assert len(flags) > 0
        flagType = type(flags[0])
    bairiak = flagType.getZeroBairiak()
    for flag in flags:
        assert isinstance(flag, flagType)
        bairiak.setFlag(flag)
    return bairiak


__all__ = ["Bairiak", "BairiakEnum", "generateBairiak"]
