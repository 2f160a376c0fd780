# Copyright (c) 2023 zcat-lines contributors

# This file is part of zcat-lines which is distributed under the
# PYTHON SOFTWARE FOUNDATION LICENSE VERSION 2.

from pathlib import Path

from setuptools import find_packages, setup

setup(
    name="zcat-lines",
    version="0.1.0",
    description="Print the lines of a multi-member gzip file using zlib-ng",
    author="zcat-lines contributors",
    long_description=Path("README.rst").read_text(),
    long_description_content_type="text/x-rst",
    license="PSF-2.0",
    keywords="zlib-ng gzip zcat lines decompression",
    zip_safe=False,
    packages=find_packages('src'),
    package_dir={'': 'src'},
    install_requires=["zlib-ng"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": [
        "zcat-lines = zcat_lines.__main__:main"]},
    classifiers=[
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: Implementation :: CPython",
        "Programming Language :: Python :: Implementation :: PyPy",
        "Development Status :: 4 - Beta",
        "Topic :: System :: Archiving :: Compression",
        "License :: OSI Approved :: Python Software Foundation License",
        "Operating System :: POSIX :: Linux",
        "Operating System :: MacOS",
        "Operating System :: Microsoft :: Windows",
    ],
    python_requires=">=3.8",
)
