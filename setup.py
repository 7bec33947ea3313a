#!/usr/bin/env python

from setuptools import setup


# Modified from http://stackoverflow.com/questions/2058802/
# how-can-i-get-the-version-defined-in-setup-py-setuptools-in-my-package
def version():
    import os
    import re

    init = os.path.join('src', 'alignstats', '__init__.py')
    with open(init) as fp:
        initData = fp.read()
    match = re.search(r"^__version__ = ['\"]([^'\"]+)['\"]",
                      initData, re.M)
    if match:
        return match.group(1)
    else:
        raise RuntimeError('Unable to find version string in %r.' % init)


setup(name='align-stats',
      version=version(),
      package_dir={'': 'src'},
      packages=['alignstats'],
      keywords=['sequence alignment', 'bit score', 'e-value'],
      classifiers=[
          'Programming Language :: Python :: 3',
          'Development Status :: 4 - Beta',
          'Intended Audience :: Developers',
          'License :: OSI Approved :: MIT License',
          'Operating System :: OS Independent',
          'Topic :: Scientific/Engineering :: Bio-Informatics',
      ],
      license='MIT',
      description=('Bit scores and e-values for local sequence alignments'),
      python_requires='>=3.10',
      install_requires=[
          'biopython>=1.80',
          'numpy>=1.14.2',
      ],
      extras_require={
          'test': ['pytest'],
      })
