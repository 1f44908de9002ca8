""" eclib build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import eclib

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=eclib.name,
    version=eclib.__version__,
    url="https://eclib.org",
    project_urls={
        "Download": "https://github.com/eclib-org/eclib/releases",
        "GitHub": "https://github.com/eclib-org/eclib",
        "Issues": "https://github.com/eclib-org/eclib/issues",
    },
    license=eclib.__license__,
    author=eclib.__author__,
    author_email=eclib.__author_email__,
    description="Prime field arithmetic and elliptic curve points",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=["dataclasses-json"],
    extras_require={
        "test": ["pytest"],
        "docs": ["sphinx", "sphinx_rtd_theme"],
    },
    keywords="cryptography elliptic-curves finite-fields weierstrass",
    python_requires=">=3.7",
    classifiers=[
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
