from pathlib import Path
import re

from setuptools import setup, find_packages

THIS_DIR = Path(__file__).parent


def find_version():
    """Grab the version out of am/version.py without importing it."""
    version_file_text = (THIS_DIR / "am" / "version.py").read_text()
    version_match = re.search(
        r"^__version__ = ['\"]([^'\"]*)['\"]", version_file_text, re.M
    )
    if version_match:
        return version_match.group(1)
    raise RuntimeError("Unable to find version string.")


setup(
    name="am",
    version=find_version(),
    description="Half-integer arithmetic and angular momentum coupling utilities.",
    long_description=(THIS_DIR / "README.md").read_text(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "Natural Language :: English",
        "Programming Language :: Python :: 3 :: Only",
        "Operating System :: OS Independent",
        "Topic :: Scientific/Engineering",
        "Topic :: Scientific/Engineering :: Physics",
    ],
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.7",
    install_requires=(THIS_DIR / "requirements.txt").read_text().splitlines(),
    extras_require={"tests": ["pytest", "hypothesis"]},
)
