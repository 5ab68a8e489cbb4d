"""A setuptools based setup module.

See:
https://packaging.python.org/en/latest/distributing.html
https://github.com/pypa/sampleproject
"""

# Always prefer setuptools over distutils
from setuptools import setup, find_packages

# To use a consistent encoding
from codecs import open
from os import path

# Read some info from the teqc package itself
import teqc

here = path.abspath(path.dirname(__file__))
exe = teqc.__executable__

# Get the long description from the relevant file
with open(path.join(here, "README.md"), encoding="utf-8") as f:
    long_description = f.read()

setup(
    name=teqc.__name__,
    version=teqc.__version__,
    description=[s.replace("\n", " ") for s in teqc.__doc__.strip().split("\n\n")][0],
    long_description=long_description,
    long_description_content_type="text/markdown",
    # Author details
    author=teqc.__author__,
    author_email=teqc.__contact__,
    # See https://pypi.python.org/pypi?%3Aaction=list_classifiers
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: MacOS",
        "Operating System :: Microsoft",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering",
    ],
    # What does your project relate to?
    keywords="gnss teqc quality-check",
    # The config directory is installed as a package so that teqc.conf is found next to the teqc package.
    packages=["config", "teqc"] + ["teqc." + p for p in find_packages(where="teqc")],
    package_data={"config": ["*.conf"]},
    python_requires=">=3.7",
    # List run-time dependencies here.  These will be installed by pip when your project is installed. For an analysis
    # of "install_requires" vs pip's requirements files see: https://packaging.python.org/en/latest/requirements.html
    install_requires=["astropy", "midgard>=1.2.0", "numpy", "pandas"],
    # List additional groups of dependencies here (e.g. development dependencies). You can install these using the
    # following syntax, for example:
    #   $ pip install -e .[dev_tools]
    extras_require={"test": ["pytest"], "dev_tools": ["black", "bumpversion", "flake8", "mypy", "pytest"]},
    # To provide executable scripts, use entry points in preference to the "scripts" keyword. Entry points provide
    # cross-platform support and allow pip to create the appropriate form of executable for the target platform.
    entry_points={"console_scripts": [f"{exe}=teqc.__main__:main"]},
)
