from setuptools import setup, find_packages

setup(
    name="audit-report",
    version="1.0.0",    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={
        "audit_report": ["i18n/locales/*.csv"],
    },
    install_requires=[
        "reportlab>=4.0",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    python_requires=">=3.10",
    description="Paginated PDF reports for nested audit results",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ]
)
