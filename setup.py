from setuptools import setup, find_packages

setup(
    name="sha0",
    version="0.1.0",
    description="Pure-Python SHA-0 message digest with a streaming, hashlib-style API and helpers for hashing pandas, pyarrow and polars columns.",
    long_description=open("Readme.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    include_package_data=True,
    install_requires=[],
    extras_require={
        "dataframes": ["pandas"],
        "arrow": ["pyarrow"],
        "polars": ["polars"],
        "test": ["pytest"],
    },
    python_requires=">=3.7",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    zip_safe=False,
)
