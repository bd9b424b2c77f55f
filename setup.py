from setuptools import setup, find_packages
from pathlib import Path

here = Path(__file__).parent
long_description = (here / "README.md").read_text(encoding="utf-8")

setup(
    name="folksonomy",
    version="0.1.0",
    description="Render tag usage counts as HTML tag indexes, tag clouds and heat maps",
    long_description=long_description,
    long_description_content_type="text/markdown",

    packages=find_packages(exclude=["tests*", "examples*", "docs*"]),
    package_data={"folksonomy": ["templates/*.html"]},
    include_package_data=True,
    python_requires=">=3.10",

    install_requires=[
        "pydantic>=2.6.0",
        "pandas>=2.2.0",
        "jinja2>=3.1.0",
        "markupsafe>=2.1.0",
        "lxml>=5.2.0",
        "pyyaml>=6.0"
    ],

    extras_require={
        "test": [
            "pytest>=7.0"
        ]
    },

    entry_points={
        "console_scripts": [
            "folksonomy=folksonomy.main:main"
        ]
    },

    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Intended Audience :: Developers",
        "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
        "Topic :: Text Processing :: Markup :: HTML",
    ],

    keywords="tags folksonomy tag-cloud heatmap html jinja2 view-helpers",
    license="MIT",
)
