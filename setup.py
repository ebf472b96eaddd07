from setuptools import setup, find_packages

setup(
    name="tusk-launcher",
    version="1.0.0",
    description="Tusk Launcher - lightweight always-on-top application launcher",
    author="Tusk Launcher contributors",
    license="GPLv3",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.11",
    install_requires=[
        "PyQt6>=6.7.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
        ],
    },
    package_data={
        "tusk": [
            "themes/*.qss",
        ],
    },
    entry_points={
        "console_scripts": [
            "tusk-launcher=tusk.main:main",
        ],
    },
)
