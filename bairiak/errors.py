# Copyright Jay Conrod. All rights reserved.
#
# This file is part of Bairiak. Use of this source code is governed by
# the GPL license that can be found in the LICENSE.txt file.


class BairiakException(Exception):
    def __init__(self, location, message):
        super(BairiakException, self).__init__(location, message)
        self.location = location
        self.message = message

    def __str__(self):
        locStr = str(self.location) if self.location is not None else "<unknown>"
        return "%s: %s error: %s" % (locStr, self.kind, self.message)

    @classmethod
    def fromDefn(cls, defn, message):
        return cls(defn.name, message)


class ReadSpecException(BairiakException):
    kind = "read spec"


class DeserializeYamlException(BairiakException):
    kind = "deserialize"


class ParseBairiakEnumsException(BairiakException):
    kind = "parse"


class PositionOutOfRangeException(BairiakException):
    kind = "position"

    def __init__(self, location, count, maximum):
        message = "Position out of range: %d. Maximum positions supported is %d." % \
            (count, maximum)
        super(PositionOutOfRangeException, self).__init__(location, message)
        self.count = count
        self.maximum = maximum


class WriteFileException(BairiakException):
    kind = "write file"
