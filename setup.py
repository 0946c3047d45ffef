import re

from setuptools import find_packages, setup


with open("termcontrol/__init__.py", "rb") as fh:
    init_text = fh.read().decode()
    VERSION = re.search(r"__version__ = \"(.*?)\"", init_text).group(1)

setup(
    name="termcontrol",
    version=VERSION,
    packages=find_packages(
        exclude=["tests", "tests.*", "examples", "examples.*"]
    ),
    python_requires=">=3.6.0",
    install_requires=[],
    extras_require={"tests": ["pytest"]},
    license="MIT",
    description="Colored text and cursor control on the terminal, that degrades gracefully when output is not a terminal.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    zip_safe=True,
    entry_points={
        "console_scripts": [
            "termcontrol = termcontrol:cli",
        ],
    },
)
