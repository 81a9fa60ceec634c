from setuptools import find_packages, setup

setup(
    name="plainwire",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=["orjson", "click"],
    extras_require={
        "test": ["pytest", "pytest-asyncio", "pytest-mock"],
    },
    entry_points={
        "console_scripts": [
            "plainwire = plainwire.main:main",
        ],
    },
    python_requires=">=3.8",
    description="A minimal HTTP/1.1 response model and wire serializer",
)
