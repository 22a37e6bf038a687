# Copyright Jay Conrod. All rights reserved.
#
# This file is part of Bairiak. Use of this source code is governed by
# the GPL license that can be found in the LICENSE.txt file.


from contextlib import redirect_stderr
from io import StringIO
import os.path
import tempfile
import unittest

from bairiak.main import main


class TestMain(unittest.TestCase):
    def setUp(self):
        self.tempDir = tempfile.TemporaryDirectory()
        self.specPath = os.path.join(self.tempDir.name, "flags.yaml")
        self.outputPath = os.path.join(self.tempDir.name, "flags.py")

    def tearDown(self):
        self.tempDir.cleanup()

    def runMain(self, *argv):
        err = StringIO()
        with redirect_stderr(err):
            status = main(list(argv))
        return status, err.getvalue()

    def testSuccess(self):
        with open(self.specPath, "w") as specFile:
            specFile.write("enums:\n  - name: Color\n    variants: [Red, Green, Blue]\n")
        status, err = self.runMain(self.specPath, self.outputPath)
        self.assertEqual(0, status)
        self.assertEqual("", err)
        with open(self.outputPath) as outFile:
            self.assertIn("class Color(BairiakEnum):", outFile.read())

    def testFailure(self):
        status, err = self.runMain(self.specPath, self.outputPath)
        self.assertEqual(1, status)
        self.assertIn("read spec error", err)
        self.assertFalse(os.path.exists(self.outputPath))

    def testUsage(self):
        with self.assertRaises(SystemExit) as cm:
            self.runMain(self.specPath)
        self.assertEqual(2, cm.exception.code)


if __name__ == "__main__":
    unittest.main()
