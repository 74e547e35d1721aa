# Copyright 2018 Max Shinn <maxwell.shinn@yale.edu>
#           2018 Norman Lam <norman.lam@yale.edu>
# 
# This file is part of RWDDM, and is available under the MIT license.
# Please see LICENSE.txt in the root directory for more information.

from setuptools import setup

with open("rwddm/_version.py", "r") as f:
    exec(f.read())

with open("README.md", "r") as f:
    long_desc = f.read()


setup(
    name = 'rwddm',
    version = __version__,
    description = 'Random walk simulation of the drift diffusion model',
    long_description = long_desc,
    long_description_content_type='text/markdown',
    license = 'MIT',
    python_requires='>=3.6',
    packages = ['rwddm'],
    install_requires = ['numpy >= 1.17', 'paranoid-scientist >= 0.2.1'],
    extras_require = {'test': ['scipy >= 1.7']},
    classifiers = [
        'Development Status :: 4 - Beta',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Topic :: Scientific/Engineering',
        'Topic :: Scientific/Engineering :: Mathematics',
        'Topic :: Scientific/Engineering :: Medical Science Apps.'],
)
