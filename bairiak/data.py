# Copyright Jay Conrod. All rights reserved.
#
# This file is part of Bairiak. Use of this source code is governed by
# the GPL license that can be found in the LICENSE.txt file.


from bairiak import utils


class Data(object):
    """Base class for plain value objects.

    Subclasses list their attributes in `propertyNames`. Positional and keyword arguments to
    the constructor fill those attributes; equality and repr are defined over them.
    """

    propertyNames = []

    def __init__(self, *args, **extra):
        assert len(args) + len(extra) == len(self.propertyNames)
        assert set(self.propertyNames[len(args):]) == set(extra.keys())
        for key, value in zip(self.propertyNames, args):
            setattr(self, key, value)
        for key, value in extra.items():
            setattr(self, key, value)

    def __repr__(self):
        return utils.reprFormat(self, *self.propertyNames)

    def __str__(self):
        return repr(self)

    def __eq__(self, other):
        return self.__class__ is other.__class__ and \
               all(getattr(self, name) == getattr(other, name)
                   for name in self.propertyNames)

    def __ne__(self, other):
        return not (self == other)

__all__ = ["Data"]
