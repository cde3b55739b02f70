"""Setup script for the Zabbix API client."""

from setuptools import setup, find_packages
import os

# Read the README file
def read_readme():
    readme_path = os.path.join(os.path.dirname(__file__), 'README.md')
    if os.path.exists(readme_path):
        with open(readme_path, 'r', encoding='utf-8') as f:
            return f.read()
    return "Zabbix API client - typed Python binding for the Zabbix JSON-RPC API"

setup(
    name='zabbix-api-client',
    version='0.1.0',
    description='Typed client for the Zabbix JSON-RPC management API (1.8 and 2.x)',
    long_description=read_readme(),
    long_description_content_type='text/markdown',
    author='Zabbix API Client Team',
    author_email='dev@example.com',
    url='https://github.com/your-org/zabbix-api-client',

    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.9',
    install_requires=[
        'requests>=2.31.0',
        'pydantic>=2.0.0',
        'click>=8.1.0',
        'python-dotenv>=1.0.0',
        'pyyaml>=6.0',
    ],

    extras_require={
        'dev': [
            'pytest>=7.4.0',
            'pytest-cov>=4.1.0',
            'black>=23.0.0',
            'flake8>=6.0.0',
            'mypy>=1.5.0',
        ],
    },

    entry_points={
        'console_scripts': [
            'zabbix-api=zabbix_api.cli:cli',
        ],
    },

    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: System Administrators',
        'Topic :: System :: Systems Administration',
        'Topic :: System :: Monitoring',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ],

    keywords='zabbix monitoring json-rpc api client',

    include_package_data=True,
    zip_safe=False,
)
