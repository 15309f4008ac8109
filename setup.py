from setuptools import find_packages, setup


setup(
    name="figures-vtable-demo",
    version="0.1.0",
    description="Virtual dispatch through explicit per-variant dispatch tables.",
    package_dir={"": "src"},
    packages=find_packages("src"),
    include_package_data=True,
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["figures-demo=figures.main:main"],
    },
    python_requires=">=3.10",
)
