from setuptools import find_packages, setup


setup(
    name="incflat",
    version="0.3.0",
    description="Flatten #include trees into one buffer, honoring #pragma once",
    author="GAHEOS",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["incflat = incflat.cli:main"]},
)
