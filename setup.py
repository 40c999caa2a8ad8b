import re
import os.path
from setuptools import setup


ROOT = os.path.dirname(__file__)
with open(os.path.join(ROOT, 'cssvalues', 'version.py')) as fd:
    VERSION = re.search("VERSION = '([^']+)'", fd.read()).group(1)

with open(os.path.join(ROOT, 'README.rst'), 'rb') as fd:
    README = fd.read().decode('utf8')


setup(
    name='cssvalues',
    version=VERSION,
    license='BSD',
    author='Simon Sapin',
    author_email='simon.sapin@exyr.org',
    description='CSS shorthand properties and lengths in points.',
    long_description=README,
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Programming Language :: Python :: 3',
    ],
    python_requires='>=3.6',
    packages=['cssvalues', 'cssvalues.tests'],
    extras_require={
        'test': ['pytest'],
    },
)
