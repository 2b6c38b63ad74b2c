import os

from setuptools import find_packages, setup


def _read_version() -> str:
    path = os.path.join(
        os.path.dirname(__file__), "pysrc", "tickwise", "_pytickwise.py"
    )
    with open(path) as f:
        for line in f:
            if line.startswith("__version__"):
                return line.split('"')[1]
    raise RuntimeError("Unable to find __version__")


setup(
    name="tickwise",
    version=_read_version(),
    description=(
        "Calendar instants and durations with 100-nanosecond precision"
    ),
    license="MIT",
    python_requires=">=3.9",
    package_dir={"": "pysrc"},
    packages=find_packages("pysrc"),
    package_data={"tickwise": ["py.typed"]},
    extras_require={
        "test": [
            "pytest",
            "hypothesis",
            "time-machine[dateutil]; implementation_name != 'pypy'",
        ],
    },
    classifiers=[
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Typing :: Typed",
    ],
)
