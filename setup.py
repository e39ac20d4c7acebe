from setuptools import setup, find_packages

setup(
    name="template_sync",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "ruamel.yaml>=0.17.0",
        "jsonschema>=3.2.0",
    ],
    extras_require={
        "test": [
            "pytest>=6.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "template-sync=template_sync.cli:main",
        ],
    },
    author="Jon Staples",
    author_email="example@example.com",
    description="A utility for synchronizing a project with its template repository",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
    ],
)
