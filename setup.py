from setuptools import setup, find_packages
import shpiller


with open('readme.rst') as f:
    long_description = f.read()


setup(
    name='shpiller',
    description="A tiny ahead-of-time compiler for exit programs to x86-64 implemented in pure Python",
    long_description=long_description,
    version=shpiller.__version__,
    include_package_data=True,
    packages=find_packages(exclude=["*.test.*", "test"]),
    python_requires='>=3.6',
    extras_require={
        'test': ['pytest', 'hypothesis', 'lark'],
    },
    entry_points={
        'console_scripts': [
            'shpiller-shc = shpiller.cli.shc:shc',
        ]
    },
    license='BSD',
    classifiers=[
        'License :: OSI Approved :: BSD License',
        'Development Status :: 3 - Alpha',
        'Programming Language :: Assembly',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Programming Language :: Python :: Implementation :: PyPy',
        'Topic :: Software Development :: Compilers',
        'Topic :: Software Development :: Code Generators',
    ]
)
