from setuptools import setup, find_packages

setup(
    name='treeid',
    version='0.1.0',
    description='Post-order identifier assignment for immutable binary trees.',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    packages=find_packages(where='src'),
    package_dir={'': 'src'},
    install_requires=[
        'pydantic>=2',
        'fastapi',
        'uvicorn',
        'requests',
        'tqdm',
    ],
    extras_require={
        'test': ['pytest', 'httpx']
    },
    python_requires='>=3.11',
    entry_points={
        'console_scripts': [
            'treeid=treeid.api.cli:main'
        ]
    }
)
