from re import search
from setuptools import setup, find_packages

with open("src/lazylet/version.py") as version_file:
    version = search('version = "(.*)"', version_file.read()).group(1)

with open("README.md") as readme_file:
    readme = readme_file.read()

setup(
    name="lazylet",
    version=version,
    description="Lazily evaluated, memoized attributes for test fixtures,"
    " in the style of RSpec's let and subject.",
    long_description=readme,
    long_description_content_type="text/markdown",
    keywords="testing fixtures lazy let subject pytest",
    license="MIT license",
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Framework :: Pytest",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Testing",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    install_requires=[],
    extras_require={
        "test": ["pytest>=7", "pytest-describe>=2"],
    },
    python_requires=">=3.8,<4",
    packages=find_packages("src"),
    package_dir={"": "src"},
    # PEP-561: https://www.python.org/dev/peps/pep-0561/
    package_data={"lazylet": ["py.typed"]},
    include_package_data=True,
    entry_points={"pytest11": ["lazylet.pytest_plugin = lazylet.pytest_plugin"]},
    zip_safe=False,
)
