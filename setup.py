from setuptools import setup, find_packages

setup(
    name='scss-bundle',
    version='0.1.0',
    description='Bundle SCSS files into one file by inlining @import directives.',
    py_modules=['scss_bundle', 'launcher'],
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.8',
    install_requires=[
        'pydantic>=2.0',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'scss-bundle = scss_bundle:main',
        ],
    },
)
