from setuptools import setup, find_packages

setup(
    name="texsync",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    package_data={
        "texsync.core": ["default_config.json"],
        "texsync.schemas": ["*.json"],
    },
    install_requires=[
        "click>=8.0.0",
        "pillow>=9.0.0",
        "jsonschema>=4.0.0",
        "python-dotenv>=0.19.0",
    ],
    extras_require={
        "cairo": ["cairosvg>=2.5.0"],
        "test": ["pytest>=7.0.0"],
    },
    entry_points={
        "console_scripts": [
            "texsync=texsync.cli:main",
        ],
    },
    python_requires=">=3.8",
    description="Keep raster textures and icons in sync with their vector sources",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
)
