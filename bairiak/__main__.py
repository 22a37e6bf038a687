# Copyright Jay Conrod. All rights reserved.
#
# This file is part of Bairiak. Use of this source code is governed by
# the GPL license that can be found in the LICENSE.txt file.


import sys

from bairiak.main import main

sys.exit(main())
