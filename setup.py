# Copyright Jay Conrod. All rights reserved.
#
# This file is part of Bairiak. Use of this source code is governed by
# the GPL license that can be found in the LICENSE.txt file.


from setuptools import setup, find_packages

setup(
    name="bairiak",
    version="0",
    description="Bairiak flag type generator",
    long_description="Generates packed bitset flag types from a YAML spec",
    license="GPLv3",
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Operating System :: POSIX",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Code Generators",
    ],
    keywords="bairiak flags bitset code generator",
    packages=find_packages(include=["bairiak", "bairiak.*"]),
    python_requires=">=3.8",
    install_requires=[
        "PyYAML",
    ],
    entry_points={
        "console_scripts": [
            "bairiak-gen=bairiak.main:main",
        ],
    },
)
