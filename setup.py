from setuptools import setup, find_packages

setup(
    name="recipe_lang",
    version="0.1",
    packages=find_packages(exclude=["tests", "tests.*"]),
    description="A parser for recipes written as prose with inline markup.",
    install_requires=["peggie>=0.2.0"],
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": [
            "recp=recipe_lang.scripts.recp:main",
        ],
    },
)
