# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="bloat",
    version="0.1.0",
    description="Report the directories holding the most bytes under one or more roots",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["bloat", "bloat.*"]),
    package_data={
        "bloat.interface": ["locales/*.json"],
    },
    install_requires=[
        "humanize",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'bloat=bloat.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "Environment :: Console",
    ],
)
