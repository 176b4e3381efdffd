import pathlib

import setuptools

here = pathlib.Path(__file__).parent.resolve()

long_description = (here / "README.md").read_text(encoding="utf-8")

setuptools.setup(
    name="eth-rpc-methods",
    version="1.0.0",
    description="Validated Python bindings for the Ethereum `eth` JSON-RPC methods",
    long_description=long_description,
    long_description_content_type="text/markdown",
    python_requires=">=3.11",
    packages=setuptools.find_packages(
        include=[
            "eth_rpc",
            "eth_rpc.*",
            "eth_rpc_base_types",
            "eth_rpc_base_types.*",
            "eth_rpc_validation",
            "eth_rpc_validation.*",
            "config",
            "config.*",
            "cli",
            "cli.*",
            "pytest_plugins",
            "pytest_plugins.*",
        ]
    ),
    install_requires=[
        "click>=8.1.0,<9",
        "pycryptodome>=3.20.0",
        "pydantic>=2.11.0,<3",
        "pytest>=8,<9",
        "PyYAML>=6.0.2",
        "requests>=2.31.0",
    ],
    extras_require={
        "test": [
            "pytest>=8,<9",
            "pytest-xdist>=3.3.1,<4",
        ],
    },
    entry_points={
        "console_scripts": [
            "eth_rpc=cli.eth_rpc:eth_rpc",
        ],
    },
)
