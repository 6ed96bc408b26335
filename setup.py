from setuptools import setup, find_packages

setup(
    name="deathroll",       # Name on PyPI (if published)
    version="0.1.0",          # Version
    package_dir={"": "src"},  # Tell setuptools to look in src/
    packages=find_packages(where="src"),  # Find packages in src/
    install_requires=["numpy", "rich", "termplotlib"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["deathroll=deathroll.cli:main"]},
    python_requires=">=3.8",  # Python version compatibility
)
