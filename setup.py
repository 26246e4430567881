from setuptools import setup, find_packages

setup(
    name="gametester",
    version="0.1.0",
    description="Concurrent seed-range tester for four player games",
    packages=find_packages(),
    py_modules=['main'],
    python_requires=">=3.10",
    install_requires=[
        "rich>=13.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        'console_scripts': [
            'gametester=gametester.cli:main',
        ],
    },
)
