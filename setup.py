from setuptools import setup

# Metadata goes in setup.cfg. These are here for GitHub's dependency graph.
setup(
    name="mockql",
    install_requires=[
        "graphql-core>=3.2",
        "inflection",
        "python-dateutil",
    ],
)
