from setuptools import setup, find_packages

install_requires = [
    # --- DOMAIN & CONFIG ---
    "pydantic>=2.0.0",
    "pyyaml>=6.0.0",
    "python-dotenv>=1.0.0",

    # --- HTTP ---
    "httpx>=0.27.0",

    # --- CONSOLE VIEW ---
    "rich>=13.0.0",
]

setup(
    name="atlas-countries",
    version="0.1.0",
    description="Atlas|Countries Explorer",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"atlas": ["shared/config/settings/*.yaml"]},
    include_package_data=True,
    install_requires=install_requires,
    extras_require={
        # --- TESTS ---
        "test": [
            "pytest",
            "pytest-asyncio==1.3.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "atlas=atlas.explorer.main:main",
        ],
    },
    python_requires=">=3.11",
)
