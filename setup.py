from setuptools import setup, find_packages

with open('requirements.txt') as f:
    required = f.read().splitlines()

setup(
    name = 'ledgerfees',
    version = '0.1.0',
    description = 'Custom fee schedules for ledger token services',
    packages = find_packages(exclude=['test', 'test.*']),
    python_requires = '>=3.9',
    install_requires = required,
    extras_require = {
        'test': ['pytest>=7.0', 'pytest-cov']
    }
)
