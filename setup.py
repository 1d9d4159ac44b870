from setuptools import setup, find_packages

setup(
    name="move-demos",
    version="0.1.0",
    packages=find_packages(include=["move_demos", "move_demos.*"]),
    install_requires=[
        # Aptos SDK (signing, BCS encoding, REST + faucet clients)
        "aptos-sdk>=0.10.0",
        # HTTP clients
        "aiohttp>=3.8.4",
        # Data validation and configuration
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        "python-dotenv>=1.0.0",
        # CLI and UI
        "click>=8.1.3",
        "rich>=13.0.0",
        # Logging
        "coloredlogs>=15.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "movedemo=move_demos.cli.main:main",
        ],
    },
    description="Demo flows for token, marketplace and coin contracts on Aptos",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.9",
)
