# Copyright Jay Conrod. All rights reserved.
#
# This file is part of Bairiak. Use of this source code is governed by
# the GPL license that can be found in the LICENSE.txt file.


from bairiak.data import Data
from bairiak.errors import PositionOutOfRangeException


class Width(Data):
    propertyNames = ["name", "bits", "factoryName"]

    def __str__(self):
        return self.name

    def canHold(self, count):
        return count < self.bits


# A Bairiak holds its flags in one of the widths below. The widths are listed in increasing
# order; a flag type uses the first one that can hold all of its positions.
U8 = Width("U8", 8, "u8")
U16 = Width("U16", 16, "u16")
U32 = Width("U32", 32, "u32")
U64 = Width("U64", 64, "u64")
U128 = Width("U128", 128, "u128")

WIDTHS = (U8, U16, U32, U64, U128)

MAX_POSITIONS = U128.bits


def selectWidth(count, location=None):
    """Returns the narrowest width for a flag type with `count` variants.

    Raises:
        PositionOutOfRangeException: if `count` is MAX_POSITIONS or more.
    """
    assert count >= 0
    for width in WIDTHS:
        if width.canHold(count):
            return width
    raise PositionOutOfRangeException(location, count, MAX_POSITIONS)


__all__ = ["Width", "U8", "U16", "U32", "U64", "U128", "WIDTHS", "MAX_POSITIONS",
           "selectWidth"]
