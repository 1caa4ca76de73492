"""
Setup для Bitrix24 клиента (batch + get/list)
"""

from setuptools import setup, find_packages

setup(
    name="ai-admin-bitrix24-client",
    version="0.1.0",
    description="Bitrix24 REST batch and list helpers for AI-Admin",
    packages=find_packages(include=["crm_integrations*", "shared*"]),
    install_requires=[
        "httpx>=0.25.0",
        "pydantic>=2.5.0",
        "pydantic-settings>=2.1.0",
        "structlog>=24.1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "pytest-asyncio>=0.23.0",
            "pytest-mock>=3.12.0",
        ],
    },
    python_requires=">=3.10",
)
