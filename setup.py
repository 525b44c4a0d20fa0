from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="unifmt",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    py_modules=["cli"],
    install_requires=[
        "click>=8.0.0",
        "loguru>=0.7.0",
        "requests>=2.28.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "unifmt=cli:cli",
        ],
    },
    python_requires=">=3.9",
    description="Batch-format Unity C# sources with astyle",
    long_description=long_description,
    long_description_content_type="text/markdown",
    keywords="unity, csharp, astyle, formatter",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Topic :: Software Development :: Quality Assurance",
        "Topic :: Utilities",
    ],
)
