from setuptools import setup, find_packages
import unescaper


with open('readme.rst') as f:
    long_description = f.read()


setup(
    name='unescaper',
    description="Decode C-style backslash escape sequences in strings",
    long_description=long_description,
    version=unescaper.__version__,
    include_package_data=True,
    packages=find_packages(exclude=["*.test.*", "test"]),
    extras_require={
        'test': ['hypothesis', 'pytest'],
    },
    license='BSD',
    classifiers=[
        'License :: OSI Approved :: BSD License',
        'Development Status :: 3 - Alpha',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Programming Language :: Python :: Implementation :: PyPy',
        'Topic :: Software Development :: Libraries',
        'Topic :: Text Processing',
    ]
)
