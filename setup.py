from setuptools import setup, find_packages

install_requires = [
    "colorama>=0.4.6",
    "PyYAML>=6.0.1",
    "tqdm>=4.66.6",
    "charset-normalizer>=3.2.0",
    "jsonschema>=4.19.0",
    "tomli>=2.0.1; python_version < '3.11'",
]

# Development dependencies
extras_require = {
    'dev': [
        'pytest>=7.4.0',
        'pytest-cov>=4.1.0',
        'black>=23.7.0',
        'isort>=5.12.0',
        'mypy>=1.4.1',
        'flake8>=6.1.0',
    ]
}

setup(
    name="textenc",
    version="1.0.0",
    author="Lucas Richert",
    license='GNU GPLv3',
    author_email="info@lucasrichert.tech",
    description="Resolve text encodings and surface silent locale-encoding fallbacks",
    packages=find_packages(include=["textenc", "textenc.*"]),
    python_requires='>=3.10',
    install_requires=install_requires,
    extras_require=extras_require,
    entry_points={
        "console_scripts": [
            "textenc=textenc.main:run",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3.10",
        'License :: OSI Approved :: GNU General Public License v3 (GPLv3)',
        "Operating System :: OS Independent",
        "Environment :: Console",
    ],
)
