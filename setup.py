""" ecalgebra build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import ecalgebra

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=ecalgebra.name,
    version=ecalgebra.__version__,
    license=ecalgebra.__license__,
    author=ecalgebra.__author__,
    author_email=ecalgebra.__author_email__,
    description="Prime field and elliptic curve group arithmetic",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    # install_requires=[],
    extras_require={
        "test": ["pytest"],
        "docs": ["sphinx", "myst-parser", "sphinx-rtd-theme"],
    },
    keywords="elliptic-curves finite-fields cryptography weierstrass group-law",
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
