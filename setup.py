from setuptools import setup, find_packages

setup(
    name="chainspec",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["cli"],
    install_requires=[
        "pynacl==1.6.2",
        "ecdsa>=0.19",
        "mnemonic>=0.21",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "chainspec=cli:main",
        ],
    },
    python_requires=">=3.8",
)
