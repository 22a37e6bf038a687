# Copyright Jay Conrod. All rights reserved.
#
# This file is part of Bairiak. Use of this source code is governed by
# the GPL license that can be found in the LICENSE.txt file.


from bairiak.container import Bairiak, BairiakEnum, generateBairiak
from bairiak.errors import (
    BairiakException,
    DeserializeYamlException,
    ParseBairiakEnumsException,
    PositionOutOfRangeException,
    ReadSpecException,
    WriteFileException,
)
from bairiak.generator import generateBairiakEnums
from bairiak.main import main
