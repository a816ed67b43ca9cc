#!/usr/bin/env python3
"""Setup script for the event reminder system."""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as f:
    long_description = f.read()

setup(
    name="event-reminder",
    version="1.0.0",
    author="Your Name",
    description="A personal event list with terminal and popup reminders",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["event_reminder", "event_reminder.*"]),
    python_requires=">=3.9",
    install_requires=[
        "PyQt6>=6.4.0",
        "tomli>=2.0.0;python_version<'3.11'",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "event-reminder=event_reminder.app:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Environment :: X11 Applications :: Qt",
        "Intended Audience :: End Users/Desktop",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Office/Business :: Scheduling",
    ],
)
