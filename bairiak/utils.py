# Copyright Jay Conrod. All rights reserved.
#
# This file is part of Bairiak. Use of this source code is governed by
# the GPL license that can be found in the LICENSE.txt file.


def bit(n, offset):
    return (n >> offset) & 1


def bitSet(n, offset):
    return n | (1 << offset)


def fitsInBits(n, width):
    return 0 <= n < (1 << width)


def reprFormat(obj, *keys):
    """Used to implement __repr__ in some classes.

    Args:
        obj: the object to generate a repr string for.
        keys ([str]): names of attributes that should be looked up and included in the string.
    """
    nameStr = obj.__class__.__name__
    itemsStr = ", ".join(repr(getattr(obj, key)) for key in keys)
    return "%s(%s)" % (nameStr, itemsStr)


__all__ = ["bit", "bitSet", "fitsInBits", "reprFormat"]
