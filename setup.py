"""
Setup file for idea_hub
Classmate Idea Hub: form validation and project listing site
"""

from setuptools import setup, find_packages

setup(
    name="idea-hub",
    version="1.0.0",
    packages=find_packages(include=["idea_hub", "idea_hub.*"]),
    include_package_data=True,
    package_data={"idea_hub": ["templates/*.html"]},
    python_requires=">=3.9",
    install_requires=[
        'flask>=2.3.0',
        'requests>=2.31.0',
        'python-dotenv>=1.0.0',
        'markupsafe>=2.1.0',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
)
