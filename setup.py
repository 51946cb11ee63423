"""Setup script for WeekGrid."""

import os
from pathlib import Path

from setuptools import find_packages, setup
from setuptools.command.develop import develop
from setuptools.command.install import install


def post_install_setup():
    """Create the user configuration directory and show setup guidance."""
    try:
        config_dir = Path.home() / ".config" / "weekgrid"
        config_dir.mkdir(parents=True, exist_ok=True)
        if hasattr(os, "chmod"):
            os.chmod(config_dir, 0o755)

        config_file = config_dir / "config.yaml"
        if not config_file.exists():
            print("\n" + "=" * 60)
            print("WeekGrid installation complete")
            print("=" * 60)
            print(f"Configuration directory: {config_dir}")
            print("\nNext steps:")
            print("1. Set WEEKGRID_ICS_URL or GOOGLE_CALENDAR_API_KEY")
            print("2. Or create config.yaml in the configuration directory")
            print("3. Run 'weekgrid --help' to see all available options")
            print("=" * 60)

    except OSError as e:
        print(f"Warning: Post-install setup failed: {e}")
        print("You may need to create the configuration directory manually.")


class PostInstallCommand(install):
    """Custom install command with post-install setup."""

    def run(self):
        install.run(self)
        post_install_setup()


class PostDevelopCommand(develop):
    """Custom develop command with post-install setup."""

    def run(self):
        develop.run(self)
        post_install_setup()


readme_file = Path(__file__).parent / "README.md"
long_description = readme_file.read_text(encoding="utf-8") if readme_file.exists() else ""

# Read requirements; test-only lines go to the dev extra
requirements_file = Path(__file__).parent / "requirements.txt"
requirements = []
dev_requirements = []

if requirements_file.exists():
    for line in requirements_file.read_text().splitlines():
        requirement, _, comment = line.partition("#")
        requirement = requirement.strip()
        if not requirement:
            continue

        if "pytest" in requirement or "testing" in comment.lower():
            dev_requirements.append(requirement)
        else:
            requirements.append(requirement)

setup(
    name="weekgrid",
    version="1.0.0",
    description="Fetch the current week from an iCal feed or calendar API and lay it out as a week grid",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="WeekGrid Team",
    packages=find_packages(exclude=["tests*"]),
    install_requires=requirements,
    extras_require={
        "dev": dev_requirements,
    },
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: End Users/Desktop",
        "Operating System :: POSIX :: Linux",
        "Operating System :: MacOS",
        "Programming Language :: Python :: 3",
        "Topic :: Office/Business :: Scheduling",
        "Framework :: AsyncIO",
    ],
    keywords="calendar ics ical google-calendar week-view dashboard async",
    entry_points={
        "console_scripts": [
            "weekgrid=weekgrid.__main__:main",
        ],
    },
    cmdclass={
        "install": PostInstallCommand,
        "develop": PostDevelopCommand,
    },
    zip_safe=False,
)
