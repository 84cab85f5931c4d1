from setuptools import setup


setup(
    name="linewrap",
    version="0.1.0",
    description="Unicode-aware text wrapping for the terminal",
    author="DragonMinded",
    license="Public Domain",
    packages=[
        "linewrap",
    ],
    install_requires=[
        req for req in open("requirements.txt").read().split("\n") if len(req) > 0
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    python_requires=">3.8",
    entry_points={
        "console_scripts": [
            "linewrap = linewrap.__main__:cli",
        ],
    },
)
