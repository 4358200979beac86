# ================================================================================================
# setup.py - Package Setup
# ================================================================================================

from setuptools import setup, find_packages

setup(
    name="frame-metaconvert",
    version="1.0.0",
    description="Converts per-frame video analytics metadata into JSON documents",
    author="SmartCamera Team",
    author_email="team@smartcamera.com",
    packages=find_packages(include=["app", "app.*", "core", "core.*", "shared", "shared.*", "services", "services.*"]),
    python_requires=">=3.8",
    install_requires=[
        "pydantic>=2.5.0",
        "pydantic-settings>=2.1.0",
        "numpy>=1.24.3",
        "structlog>=23.2.0",
        "python-dotenv>=1.0.0"
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
            "black>=23.7.0",
            "flake8>=6.0.0",
            "mypy>=1.5.0"
        ]
    },
    entry_points={
        "console_scripts": [
            "metaconvert=services.metaconvert.main:main"
        ]
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11"
    ]
)
