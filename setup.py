from setuptools import setup, find_packages

setup(
    name="vlog",
    version="0.1.0b0",
    description="Leveled logging on a plain text logger — print/printf/println, fatal/panic, and -v gated V-style calls",
    author="Dustin",
    author_email="6962246+djdarcy@users.noreply.github.com",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[],
    extras_require={
        "dev": ["pytest>=7", "pytest-cov"],
    },
    entry_points={
        "console_scripts": [
            "vlog=vlog.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: System :: Logging",
    ],
    python_requires=">=3.10",
)
