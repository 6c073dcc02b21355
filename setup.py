from pathlib import Path

from setuptools import setup, find_packages

VERSION = (Path(__file__).parent / "crawlrunner" / "VERSION").read_text(encoding="utf-8").strip()

setup(
    name="crawl-runner",
    version=VERSION,
    description="Command-line front-end that validates crawl options and starts a crawl engine",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    package_data={
        "crawlrunner": ["VERSION"],
    },
    install_requires=[
        "selenium>=4.1.0",
        "validators>=0.20.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        'console_scripts': [
            'crawl-runner=crawlrunner.__main__:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
)
