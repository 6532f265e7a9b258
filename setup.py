from re import search
from setuptools import setup, find_packages

with open("src/grouper/version.py") as version_file:
    version = search('version = "(.*)"', version_file.read()).group(1)

with open("README.md") as readme_file:
    readme = readme_file.read()

setup(
    name="grouper",
    version=version,
    description="Group collections by property paths, functions and patterns,"
    " like the group by helper of common utility libraries.",
    long_description=readme,
    long_description_content_type="text/markdown",
    keywords="group-by collections utilities",
    license="MIT license",
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
    ],
    install_requires=[],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-describe>=2.1",
            "pytest-benchmark>=4.0",
        ],
    },
    python_requires=">=3.10,<4",
    packages=find_packages("src"),
    package_dir={"": "src"},
    # PEP-561: https://www.python.org/dev/peps/pep-0561/
    package_data={"grouper": ["py.typed"]},
    include_package_data=True,
    zip_safe=False,
)
