""" eckeys build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import eckeys

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=eckeys.name,
    version=eckeys.__version__,
    license=eckeys.__license__,
    author=eckeys.__author__,
    author_email=eckeys.__author_email__,
    description="Elliptic curve arithmetic and key pairs over secp256k1",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"eckeys": ["data/*.json"]},
    include_package_data=True,
    install_requires=["dataclasses_json"],
    extras_require={"tests": ["pytest"]},
    keywords="elliptic-curves secp256k1 key-pair modular-arithmetic",
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
        "Topic :: Scientific/Engineering",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
