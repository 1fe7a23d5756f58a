from setuptools import setup


if __name__ == "__main__":

    with open("README.rst") as f:
        long_description = f.read()

    setup(
        classifiers=[
            "Environment :: Web Environment",
            "Intended Audience :: Developers",
            "License :: OSI Approved :: MIT License",
            "Operating System :: OS Independent",
            "Programming Language :: Python",
            "Programming Language :: Python :: 3.8",
            "Programming Language :: Python :: 3.9",
            "Programming Language :: Python :: 3.10",
            "Programming Language :: Python :: 3.11",
            "Programming Language :: Python :: 3.12",
            "Programming Language :: Python :: Implementation :: CPython",
            "Programming Language :: Python :: Implementation :: PyPy",
            "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
            "Topic :: Software Development :: Libraries :: Python Modules",
        ],
        description="Mutable HTTP responses for twisted.web",
        long_description=long_description,
        long_description_content_type="text/x-rst",
        python_requires=">=3.8",
        # Keep in step with src/rejoinder/_version.py
        version="21.8.0",
        install_requires=[
            "attrs>=22.2",
            "hyperlink",
            "incremental",
            "Twisted>=21.2",
            "zope.interface",
        ],
        extras_require={
            "test": [
                "hypothesis>=6.90",
            ],
        },
        keywords="twisted web http response",
        license="MIT",
        name="rejoinder",
        packages=["rejoinder", "rejoinder.test"],
        package_dir={"": "src"},
        package_data=dict(
            rejoinder=[],
        ),
        maintainer="The Rejoinder contributors",
        zip_safe=False,
    )
