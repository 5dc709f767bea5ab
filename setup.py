from setuptools import setup, find_packages

setup(
    name="probeinfo",
    version="0.1.0",
    packages=find_packages(include=["probeinfo", "probeinfo.*"]),
    install_requires=[
        "rich>=13.0.0",  # Explicit minimum version
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "probeinfo=probeinfo.__main__:main",
        ],
    },
    python_requires=">=3.8",
)
