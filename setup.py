"""setuptools setup for Tea Timer.

Install for development:
    pip install -e ".[test]"
    teatimer
"""

from setuptools import find_packages, setup

setup(
    name="teatimer",
    version="0.1.0",
    description="Terminal tea timer: pick a tea, watch it brew.",
    packages=find_packages(include=["teatimer", "teatimer.*"]),
    python_requires=">=3.10",
    install_requires=[
        "textual>=0.60",
        "rich>=13.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["teatimer = teatimer.__main__:main"],
    },
)
