from setuptools import find_packages, setup

setup(
    name="tone-slider-backend",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["bootloader"],
    python_requires=">=3.11",
    install_requires=[
        "fastapi>=0.110",
        "uvicorn>=0.27",
        "pydantic>=2.5",
        "openai>=1.30",
        "redis>=5.0.1",
        "aiohttp>=3.9",
        "python-dotenv>=1.0",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
            "httpx>=0.26",
        ],
    },
    package_data={"services.tone_adjustment.config": ["*.yaml"]},
    include_package_data=True,
    entry_points={"console_scripts": ["tone-slider=client.cli:main"]},
    description="Tone and style adjustment service with a 2D slider client",
)
