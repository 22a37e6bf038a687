# Copyright Jay Conrod. All rights reserved.
#
# This file is part of Bairiak. Use of this source code is governed by
# the GPL license that can be found in the LICENSE.txt file.


import argparse
import sys

from bairiak.errors import BairiakException
from bairiak.generator import generateBairiakEnums


def main(argv=None):
    cmdline = argparse.ArgumentParser(description="Generate Bairiak flag types from a spec")
    cmdline.add_argument("spec", metavar="spec.yaml", type=str,
                         help="YAML file listing enums and their variants")
    cmdline.add_argument("output", metavar="output.py", type=str,
                         help="Python module to write")
    args = cmdline.parse_args(argv)

    try:
        generateBairiakEnums(args.spec, args.output, sys.stderr)
    except BairiakException:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
