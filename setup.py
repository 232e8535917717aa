#!/usr/bin/env python

import os.path

from setuptools import setup

here = os.path.abspath(os.path.dirname(__file__))


def read(name):
    try:
        with open(os.path.join(here, name)) as f:
            return f.read()
    except OSError:
        return ""


README = read("README.md")
CHANGES = read("CHANGES.md")


setup(name='XMLNames',
      version='1.0.0',
      description='Qualified XML names, namespace URI encoding and prefix generation for python',
      long_description=README + "\n\n" + CHANGES,
      long_description_content_type="text/markdown",
      classifiers=[
            'Development Status :: 4 - Beta',
            'Environment :: Console',
            'Intended Audience :: Developers',
            'License :: OSI Approved :: GNU Lesser General Public License v3 or later (LGPLv3+)',
            'Operating System :: OS Independent',
            'Programming Language :: Python :: 3',
            'Topic :: Software Development :: Libraries',
            'Topic :: Software Development :: Libraries :: Python Modules',
            'Topic :: Text Processing :: Markup :: XML'
      ],
      packages=['xmlnames'],
      python_requires='>=3.7',
      install_requires=['click'],
      extras_require={'test': ['pytest']},
      entry_points={
          'console_scripts': ['xmlnames=xmlnames.cmdline:main'],
      },
     )
