from setuptools import setup, find_packages

setup(
    name='osdsctl',
    version='0.1.0',
    packages=find_packages(exclude=['osdsctl.tests', 'osdsctl.tests.*']),
    include_package_data=True,
    install_requires=[
        'typer[all]',
        'rich',
        'python-dotenv',
        'requests'
    ],
    extras_require={
        'test': [
            'pytest'
        ]
    },
    entry_points={
        'console_scripts': [
            'osdsctl=osdsctl.cli:main'
        ]
    },
    description='Command line client for managing block storage volumes on an OpenSDS cluster',
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
    ],
    python_requires='>=3.8',
)
