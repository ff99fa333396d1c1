from pathlib import Path
from setuptools import setup, find_packages


def read_readme() -> str:
    readme_path = Path(__file__).resolve().parent / "README.md"
    return readme_path.read_text(encoding="utf-8") if readme_path.exists() else ""


setup(
    name="letc",
    version="2.0.0",
    packages=find_packages(include=["letc", "letc.*"]),
    package_data={"letc": ["wordlist.txt"]},
    include_package_data=True,
    install_requires=[
        "cryptography>=41.0.0",
        "numpy>=1.24.0",
    ],
    python_requires=">=3.10",
    description="Transport-safe text encoding with optional password encryption",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
)
